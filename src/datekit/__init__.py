"""
datekit
~~~~~~~

A date value with three extras: relative-time phrasing, timezone shifting and
token-based formatting, all rendered through CLDR locale data.

Basic usage::

    from datekit import ExtendedDate

    now  = ExtendedDate("2024-01-10T12:00:00Z")
    past = ExtendedDate("2024-01-05T12:00:00Z")
    now.time_difference(past)                          # → '5 days ago'

    d = ExtendedDate("2024-06-01T13:45:30Z", {"timeZoneOrigin": "UTC"})
    d.format("YYYY-MM-DD HH:mm:ss")                    # → '2024-06-01 13:45:30'
    d.shift_time_zone(target="America/New_York")       # instant moves 4 h back

Configuration lives on each value::

    d.config.locale = "fr-FR"
    d.config.include_week_unit = False

Public API
----------
ExtendedDate          The decorated date value.
DateConfig            Per-value formatting and locale defaults.
DateError             Base exception; carries ``code`` and ``context``.
InvalidArgumentError  An argument could not be coerced to an instant.
InvalidSegmentError   A matched format token has no render rule.
"""

from __future__ import annotations

from datekit._exceptions import DateError, InvalidArgumentError, InvalidSegmentError
from datekit.config import DateConfig
from datekit.date import ExtendedDate
from datekit.formatting import TOKENS, Token
from datekit.instant import coerce_instant

__all__ = [
    "DateConfig",
    "DateError",
    "ExtendedDate",
    "InvalidArgumentError",
    "InvalidSegmentError",
    "TOKENS",
    "Token",
    "coerce_instant",
]
