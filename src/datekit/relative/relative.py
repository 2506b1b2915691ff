from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

import numpy as np

from datekit.instant import coerce_instant
from datekit.intl import phrase

if TYPE_CHECKING:
    from datekit.config import DateConfig

ArrayLike = Union[int, "np.ndarray"]

# Fixed-length approximations, largest first: a year is 365 days and a
# month is a twelfth of it.  Phrase boundaries depend on these values.
UNIT_NAMES: np.ndarray = np.array(
    ["year", "quarter", "month", "week", "day", "hour", "minute", "second"]
)
UNIT_MS: np.ndarray = np.array(
    [31_536_000_000, 7_884_000_000, 2_628_000_000, 604_800_000,
     86_400_000, 3_600_000, 60_000, 1_000],
    dtype=np.int64,
)

_QUARTER = 1
_WEEK = 3


def unit_table(include_quarter: bool = False, include_week: bool = True) -> tuple[np.ndarray, np.ndarray]:
    mask = np.ones(UNIT_NAMES.size, dtype=bool)
    mask[_QUARTER] = include_quarter
    mask[_WEEK] = include_week
    return UNIT_NAMES[mask], UNIT_MS[mask]


def bucket(
    difference: ArrayLike,
    include_quarter: bool = False,
    include_week: bool = True,
) -> tuple[int, str] | tuple[np.ndarray, np.ndarray]:
    """
    Pick the largest unit reaching a whole count of at least one.

    ``difference`` is in milliseconds, positive for the future.  Returns
    ``(signed_count, unit)``; sub-second differences give ``(0, "second")``.
    Arrays are bucketed element-wise and returned with their shape intact.
    """
    scalar = np.ndim(difference) == 0
    d = np.atleast_1d(np.asarray(difference, dtype=np.int64))
    shape = d.shape
    d = d.ravel()

    names, sizes = unit_table(include_quarter, include_week)

    # ── counts per (difference, unit) ────────────────────────────────────
    counts = np.abs(d)[:, None] // sizes[None, :]
    reached = counts >= 1
    # "second" is always last, so an unreached row falls through to it.
    first = np.where(reached.any(axis=1), reached.argmax(axis=1), sizes.size - 1)

    magnitudes = np.sign(d) * counts[np.arange(d.size), first]
    units = names[first]

    if scalar:
        return int(magnitudes[0]), str(units[0])
    return magnitudes.reshape(shape), units.reshape(shape)


def time_difference(time: int, other: Any, config: DateConfig) -> str:
    """Phrase the distance from ``time`` to ``other`` ("in 4 hours", "5 days ago")."""
    magnitude, unit = bucket(
        coerce_instant(other) - time,
        include_quarter=bool(config.include_quarter_unit),
        include_week=bool(config.include_week_unit),
    )
    options = {
        "localeMatcher": config.locale_matcher,
        "style": config.style,
        "numeric": config.numeric,
    }
    return phrase(config.locale, options, magnitude, unit)
