"""
datekit.relative
~~~~~~~~~~~~~~~~

Relative-time phrasing.  The distance between two instants is bucketed into
the largest fixed-length unit it reaches (year, optional quarter, month,
optional week, day, hour, minute, second) and handed to the CLDR phraser.

Basic usage::

    from datekit.relative import bucket

    bucket(-432_000_000)                      # → (-5, 'day')
    bucket(1_209_600_000, include_week=False) # → (14, 'day')

NumPy arrays are accepted as well::

    import numpy as np
    counts, units = bucket(np.array([1_000, -7_200_000]))
"""

from __future__ import annotations

from datekit.relative.relative import UNIT_MS, UNIT_NAMES, bucket, time_difference, unit_table

__all__ = [
    "UNIT_MS",
    "UNIT_NAMES",
    "bucket",
    "time_difference",
    "unit_table",
]
