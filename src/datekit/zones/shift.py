from __future__ import annotations

import logging
from datetime import datetime, timedelta

from datekit.instant import to_datetime
from datekit.intl import Zone, wall_clock

logger = logging.getLogger(__name__)

_MS = timedelta(milliseconds=1)


def offset_delta(time: int, origin: Zone, target: Zone) -> int:
    """
    Wall-clock difference in ms between ``origin`` and ``target`` at ``time``.

    Both wall clocks are rendered as text and parsed back, so the result
    follows whatever DST rule applies at that instant.
    """
    moment = to_datetime(time)
    origin_wall = datetime.fromisoformat(wall_clock(moment, origin))
    target_wall = datetime.fromisoformat(wall_clock(moment, target))
    return (origin_wall - target_wall) // _MS


def shift_time_zone(time: int, origin: Zone = None, target: Zone = "UTC") -> int:
    delta = offset_delta(time, origin, target)
    logger.debug("Shifting %d from %s to %s by %d ms", time, origin or "local", target, -delta)
    return time - delta
