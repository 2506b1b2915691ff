"""
datekit.intl
~~~~~~~~~~~~

Thin adapters over Babel's CLDR data that play the role of the platform
locale services: a calendar formatter, a relative-time phraser and zone /
locale resolution.

Basic usage::

    from datetime import datetime, timezone
    from datekit.intl import render, phrase

    moment = datetime(2024, 7, 4, 14, 4, 5, tzinfo=timezone.utc)
    render("en", moment, {"timeZone": "UTC", "month": "long"})   # → 'July'
    phrase("en", {"style": "long"}, -5, "day")                    # → '5 days ago'
"""

from __future__ import annotations

from datekit.intl.datetime_format import (
    Zone,
    offset_name,
    render,
    resolve_zone,
    wall_clock,
    zone_name,
)
from datekit.intl.locales import resolve_locale
from datekit.intl.relative_format import phrase

__all__ = [
    "Zone",
    "offset_name",
    "phrase",
    "render",
    "resolve_locale",
    "resolve_zone",
    "wall_clock",
    "zone_name",
]
