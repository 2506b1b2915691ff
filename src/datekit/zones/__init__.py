"""
datekit.zones
~~~~~~~~~~~~~

Timezone shifting.  The instant is moved by the wall-clock difference between
an origin and a target zone, recomputed for that very instant so DST is
honoured.

Basic usage::

    from datekit.zones import shift_time_zone

    # 2024-01-01T12:00:00Z seen as New York wall clock: five hours earlier.
    shifted = shift_time_zone(1_704_110_400_000, "UTC", "America/New_York")
"""

from __future__ import annotations

from datekit.zones.shift import offset_delta, shift_time_zone

__all__ = ["offset_delta", "shift_time_zone"]
