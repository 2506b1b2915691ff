from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Mapping

from babel import Locale
from babel.dates import (
    format_date,
    format_datetime,
    format_skeleton,
    format_time,
    get_datetime_format,
    get_timezone,
    get_timezone_gmt,
    get_timezone_name,
)
from babel.localtime import get_localzone

from .locales import resolve_locale

STYLES = ("full", "long", "medium", "short")
ZONE_NAME_STYLES = ("long", "short", "longOffset", "shortOffset", "longGeneric", "shortGeneric")

# Option value -> CLDR pattern letters, for the fields that need no clock cycle.
_FIELD_LETTERS: dict[str, dict[str, str]] = {
    "weekday": {"long": "EEEE", "short": "EEE", "narrow": "EEEEE"},
    "year":    {"numeric": "y", "2-digit": "yy"},
    "month":   {"numeric": "M", "2-digit": "MM", "long": "LLLL", "short": "LLL", "narrow": "LLLLL"},
    "day":     {"numeric": "d", "2-digit": "dd"},
    "minute":  {"numeric": "m", "2-digit": "mm"},
    "second":  {"numeric": "s", "2-digit": "ss"},
}
_FIELD_ORDER = ("weekday", "year", "month", "day", "hour", "minute", "second")

_HOUR_LETTER = {"h11": "K", "h12": "h", "h23": "H", "h24": "k"}
_HOUR_WIDTH = {"numeric": 1, "2-digit": 2}

_DEFAULT_DATE = {"year": "numeric", "month": "numeric", "day": "numeric"}

_OFFSET_RE = re.compile(r"^(?:GMT|UTC)?([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)

_WALL_CLOCK_PATTERN = "yyyy-MM-dd'T'HH:mm:ss"

# Quoted literal or a specific-zone field in a CLDR pattern.
_QUOTED_OR_ZONE = re.compile(r"'(?:[^']|'')*'|z+")

Zone = str | tzinfo | None


def resolve_zone(name: Zone) -> tzinfo:
    """
    Resolve a zone designation to a tzinfo.

    None is the host-local zone, ``+07:00`` / ``GMT-3:30`` style strings are
    fixed offsets, anything else is looked up by name (LookupError if
    unknown).
    """
    if name is None:
        return get_localzone()
    if isinstance(name, tzinfo):
        return name

    text = str(name).strip()
    match = _OFFSET_RE.match(text)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        return timezone(-offset if sign == "-" else offset)
    return get_timezone(text)


def offset_name(moment: datetime, locale: Locale, long: bool = True) -> str:
    """
    ``GMT+07:00`` (long) or ``GMT+7`` (short); a zero offset is bare ``GMT``.

    Sub-minute offsets (local mean time) keep their seconds: ``GMT-04:56:02``.
    """
    offset = moment.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    minutes, seconds = divmod(abs(total), 60)
    hours, minutes = divmod(minutes, 60)
    sign = "-" if total < 0 else "+"

    if not total:
        text = ""
    elif long:
        text = f"{sign}{hours:02d}:{minutes:02d}"
    elif minutes or seconds:
        text = f"{sign}{hours}:{minutes:02d}"
    else:
        text = f"{sign}{hours}"
    if seconds:
        text += f":{seconds:02d}"
    return locale.zone_formats["gmt"] % text


def zone_name(moment: datetime, style: str, locale: Locale) -> str:
    if style == "longOffset":
        return offset_name(moment, locale, long=True)
    if style == "shortOffset":
        return offset_name(moment, locale, long=False)
    if style in ("long", "short"):
        name = get_timezone_name(moment, width=style, locale=locale)
        # No CLDR name for this zone: use the localized GMT format.
        if name == get_timezone_gmt(moment, width=style, locale=locale):
            return offset_name(moment, locale, long=style == "long")
        return name
    if style in ("longGeneric", "shortGeneric"):
        return get_timezone_name(moment.tzinfo, width=style[: -len("Generic")], locale=locale)
    raise ValueError(f"Unknown timeZoneName {style!r}; expected one of {ZONE_NAME_STYLES}.")


def render(locale: str, instant: datetime, options: Mapping[str, Any]) -> str:
    """
    Locale-aware calendar formatter.

    Takes option names from the Intl.DateTimeFormat vocabulary (timeZone,
    dateStyle, timeStyle, year, month, day, weekday, hour, minute, second,
    hourCycle, timeZoneName) and renders ``instant`` with Babel.  When only a
    zone name is requested the numeric date is rendered in front of it, e.g.
    ``7/4/2024, GMT+7``.
    """
    opts = dict(options)
    loc = resolve_locale(locale)
    moment = _aware(instant).astimezone(resolve_zone(opts.pop("timeZone", None)))

    zone_style = opts.pop("timeZoneName", None)
    date_style = opts.pop("dateStyle", None)
    time_style = opts.pop("timeStyle", None)
    hour_cycle = opts.pop("hourCycle", None)

    separator = " "
    if date_style is not None or time_style is not None:
        if opts:
            raise ValueError(f"dateStyle/timeStyle cannot be combined with {sorted(opts)}.")
        text = _render_styles(moment, date_style, time_style, loc)
    else:
        if not any(field in opts for field in _FIELD_ORDER):
            opts.update(_DEFAULT_DATE)
            separator = ", "
        text = _render_fields(moment, opts, hour_cycle, loc)

    if zone_style is not None:
        text = f"{text}{separator}{zone_name(moment, zone_style, loc)}"
    return text


def wall_clock(instant: datetime, zone: Zone) -> str:
    """ISO 8601 wall-clock text (no offset) of ``instant`` as seen in ``zone``."""
    moment = _aware(instant).astimezone(resolve_zone(zone))
    return format_datetime(moment, _WALL_CLOCK_PATTERN, locale="en")


# ── helpers ───────────────────────────────────────────────────────────────────

def _aware(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def _check_style(name: str, value: str | None) -> None:
    if value is not None and value not in STYLES:
        raise ValueError(f"Unknown {name} {value!r}; expected one of {STYLES}.")


def _render_styles(
    moment: datetime, date_style: str | None, time_style: str | None, loc: Locale
) -> str:
    _check_style("dateStyle", date_style)
    _check_style("timeStyle", time_style)

    if date_style is None:
        return _format_time(moment, time_style, loc)
    if time_style is None:
        return format_date(moment, date_style, locale=loc)
    return (
        get_datetime_format(date_style, locale=loc)
        .replace("'", "")
        .replace("{0}", _format_time(moment, time_style, loc))
        .replace("{1}", format_date(moment, date_style, locale=loc))
    )


def _format_time(moment: datetime, style: str, loc: Locale) -> str:
    """Time in a CLDR style, with any zone field rendered through ``zone_name``."""

    def zone_literal(match: re.Match[str]) -> str:
        field = match.group(0)
        if field.startswith("'"):
            return field
        name = zone_name(moment, "long" if len(field) >= 4 else "short", loc)
        return "'" + name.replace("'", "''") + "'"

    pattern = _QUOTED_OR_ZONE.sub(zone_literal, loc.time_formats[style].pattern)
    return format_time(moment, pattern, locale=loc)


def _hour_letters(width: str, hour_cycle: str | None, loc: Locale) -> str:
    if width not in _HOUR_WIDTH:
        raise ValueError(f"Unknown hour {width!r}; expected one of {tuple(_HOUR_WIDTH)}.")
    if hour_cycle is None:
        hour_cycle = "h12" if "h" in loc.time_formats["short"].pattern else "h23"
    if hour_cycle not in _HOUR_LETTER:
        raise ValueError(f"Unknown hourCycle {hour_cycle!r}; expected one of {tuple(_HOUR_LETTER)}.")
    return _HOUR_LETTER[hour_cycle] * _HOUR_WIDTH[width]


def _render_fields(
    moment: datetime, opts: dict[str, Any], hour_cycle: str | None, loc: Locale
) -> str:
    letters: list[str] = []
    for field in _FIELD_ORDER:
        value = opts.pop(field, None)
        if value is None:
            continue
        if field == "hour":
            letters.append(_hour_letters(value, hour_cycle, loc))
            continue
        try:
            letters.append(_FIELD_LETTERS[field][value])
        except KeyError:
            raise ValueError(
                f"Unknown {field} {value!r}; expected one of {tuple(_FIELD_LETTERS[field])}."
            ) from None

    if opts:
        raise ValueError(f"Unknown option(s) {sorted(opts)}.")

    if len(letters) == 1:
        pattern = letters[0]
        if pattern[0] in "Kh":
            pattern += " a"
        return format_datetime(moment, pattern, locale=loc)

    skeleton = "".join(letters).replace("L", "M")
    return format_skeleton(skeleton, moment, fuzzy=True, locale=loc)
