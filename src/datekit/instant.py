from __future__ import annotations

import numbers
from datetime import date, datetime, timedelta, timezone
from typing import Any

import numpy as np

from ._exceptions import InvalidArgumentError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MS = timedelta(milliseconds=1)


def _millis(moment: datetime) -> int:
    return (moment - EPOCH) // _MS


MIN_TIME: int = _millis(datetime.min.replace(tzinfo=timezone.utc))
MAX_TIME: int = _millis(datetime.max.replace(tzinfo=timezone.utc))


def now() -> int:
    return _millis(datetime.now(timezone.utc))


def to_datetime(time: int) -> datetime:
    """Aware UTC datetime for an epoch-millisecond instant."""
    return EPOCH + timedelta(milliseconds=time)


def coerce_instant(value: Any) -> int:
    """
    Coerce ``value`` to epoch milliseconds.

    Accepts anything with ``get_time()`` (an ExtendedDate), datetimes (naive
    ones are host-local wall clock), dates (UTC midnight), finite real
    numbers (epoch ms, truncated) and ISO 8601 strings.  Everything else,
    including NaN and instants outside the datetime range, raises
    InvalidArgumentError.
    """
    get_time = getattr(value, "get_time", None)
    if callable(get_time):
        return int(get_time())

    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(value)

    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.astimezone()
        return _millis(moment)

    if isinstance(value, date):
        return _millis(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))

    if isinstance(value, numbers.Real):
        if not np.isfinite(float(value)) or not MIN_TIME <= value <= MAX_TIME:
            raise InvalidArgumentError(value)
        return int(value)

    if isinstance(value, str):
        return _parse_iso(value)

    raise InvalidArgumentError(value)


def _parse_iso(value: str) -> int:
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        day = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return coerce_instant(day)

    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidArgumentError(value) from None
    return coerce_instant(moment)
