from __future__ import annotations

import math
from typing import Any, Mapping

from babel.numbers import format_decimal

from .locales import resolve_locale

UNITS = ("year", "quarter", "month", "week", "day", "hour", "minute", "second")
RELATIVE_STYLES = ("long", "short", "narrow")
NUMERIC_MODES = ("auto", "always", "never")

# CLDR keys the relative-time patterns per style, e.g. "day", "day-short".
_STYLE_KEYS: dict[str, tuple[str, ...]] = {
    "long":   ("",),
    "short":  ("-short", ""),
    "narrow": ("-narrow", "-short", ""),
}


def phrase(
    locale: str,
    options: Mapping[str, Any] | None,
    magnitude: float,
    unit: str,
) -> str:
    """
    Relative-time phraser: ``phrase("en", {}, -5, "day") == "5 days ago"``.

    ``options`` may carry ``localeMatcher``, ``style`` and ``numeric``.  The
    CLDR data shipped with Babel holds only numeric patterns, so every
    numeric mode renders the number.
    """
    opts = dict(options or {})
    style = opts.get("style") or "long"
    numeric = opts.get("numeric") or "auto"
    matcher = opts.get("localeMatcher") or "best fit"

    if unit not in UNITS:
        raise ValueError(f"Unknown unit {unit!r}; expected one of {UNITS}.")
    if style not in RELATIVE_STYLES:
        raise ValueError(f"Unknown style {style!r}; expected one of {RELATIVE_STYLES}.")
    if numeric not in NUMERIC_MODES:
        raise ValueError(f"Unknown numeric {numeric!r}; expected one of {NUMERIC_MODES}.")

    loc = resolve_locale(locale, matcher)
    past = magnitude < 0 or (magnitude == 0 and math.copysign(1.0, magnitude) < 0)
    direction = "past" if past else "future"

    # Babel keeps relative-time patterns only in its raw CLDR mapping; this
    # is the same lookup babel.dates.format_timedelta performs.
    fields = loc._data["date_fields"]
    for suffix in _STYLE_KEYS[style]:
        patterns = fields.get(unit + suffix, {}).get(direction)
        if patterns:
            break
    else:
        raise LookupError(f"Locale {loc} has no relative-time data for {unit!r}.")

    count = abs(magnitude)
    pattern = patterns.get(loc.plural_form(count)) or patterns["other"]
    return pattern.replace("{0}", format_decimal(count, locale=loc))
