from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Mapping

from datekit.intl import Zone, render

RenderFn = Callable[[datetime, Zone, str], str]


@dataclass(frozen=True, slots=True)
class Token:
    spelling: str
    render: RenderFn


# ── render rule factories ─────────────────────────────────────────────────────

def _field(**options: Any) -> RenderFn:
    def rule(moment: datetime, zone: Zone, locale: str) -> str:
        return render(locale, moment, {"timeZone": zone, **options})
    return rule


def _padded(width: int, **options: Any) -> RenderFn:
    field = _field(**options)

    def rule(moment: datetime, zone: Zone, locale: str) -> str:
        return field(moment, zone, locale).rjust(width, "0")
    return rule


def _zone_name(style: str) -> RenderFn:
    # The formatter prefixes the zone name with a date; keep the last segment.
    field = _field(timeZoneName=style)

    def rule(moment: datetime, zone: Zone, locale: str) -> str:
        return field(moment, zone, locale).split()[-1]
    return rule


def _milliseconds(width: int) -> RenderFn:
    def rule(moment: datetime, zone: Zone, locale: str) -> str:
        return str(moment.microsecond // 1000).rjust(width, "0")
    return rule


_long_offset = _zone_name("longOffset")


def _offset(moment: datetime, zone: Zone, locale: str) -> str:
    if str(zone).lower() == "utc":
        return "+00:00"
    # Offsets are locale independent; "en" guarantees the GMT prefix.
    name = _long_offset(moment, zone, "en")
    if name.startswith("GMT"):
        name = name[len("GMT"):]
    return name or "+00:00"


def _aliases(spellings: tuple[str, ...], rule: RenderFn) -> tuple[Token, ...]:
    return tuple(Token(spelling, rule) for spelling in spellings)


# ── token table ───────────────────────────────────────────────────────────────
#
# Upper case: long form / fixed width.  Lower case: compact form.
# A trailing "1": unpadded numeric form.

TOKENS: tuple[Token, ...] = (
    Token("DATETIME+-", _field(dateStyle="full", timeStyle="medium", timeZoneName="shortOffset")),
    Token("Datetime+-", _field(dateStyle="medium", timeStyle="medium", timeZoneName="shortOffset")),
    Token("datetime+-", _field(dateStyle="short", timeStyle="medium", timeZoneName="shortOffset")),
    Token("DATETIME",   _field(dateStyle="full", timeStyle="medium")),
    Token("Datetime",   _field(dateStyle="medium", timeStyle="medium")),
    Token("datetime",   _field(dateStyle="short", timeStyle="medium")),
    Token("DATE",       _field(dateStyle="full")),
    Token("Date",       _field(dateStyle="medium")),
    Token("date",       _field(dateStyle="short")),
    Token("TIME+-",     _field(timeStyle="medium", timeZoneName="longOffset")),
    Token("TIME",       _field(timeStyle="long")),
    Token("Time",       _field(timeStyle="medium")),
    Token("time",       _field(timeStyle="short")),
    *_aliases(("YEAR", "YYYY"), _field(year="numeric")),
    *_aliases(("year", "yy"), _field(year="2-digit")),
    Token("MONTH",      _field(month="long")),
    Token("month",      _field(month="short")),
    Token("Month1",     _field(month="narrow")),
    Token("MM",         _padded(2, month="2-digit")),
    Token("MM1",        _field(month="numeric")),
    *_aliases(("WEEKDAY", "DAY"), _field(weekday="long")),
    *_aliases(("weekday", "day"), _field(weekday="short")),
    *_aliases(("Weekday1", "Day1"), _field(weekday="narrow")),
    Token("DD",         _padded(2, day="2-digit")),
    Token("DD1",        _field(day="numeric")),
    Token("HH",         _padded(2, hour="2-digit", hourCycle="h23")),
    Token("HH1",        _field(hour="numeric", hourCycle="h23")),
    Token("H11",        _field(hour="2-digit", hourCycle="h11")),
    Token("H12",        _field(hour="2-digit", hourCycle="h12")),
    Token("H23",        _padded(2, hour="2-digit", hourCycle="h23")),
    Token("H24",        _padded(2, hour="2-digit", hourCycle="h24")),
    Token("h11",        _field(hour="numeric", hourCycle="h11")),
    Token("h12",        _field(hour="numeric", hourCycle="h12")),
    Token("h23",        _field(hour="numeric", hourCycle="h23")),
    Token("h24",        _field(hour="numeric", hourCycle="h24")),
    *_aliases(("mm", "ii"), _padded(2, minute="2-digit")),
    *_aliases(("mm1", "ii1"), _field(minute="numeric")),
    Token("ss",         _padded(2, second="2-digit")),
    Token("ss1",        _field(second="numeric")),
    *_aliases(("ms", "sss"), _milliseconds(3)),
    *_aliases(("ms1", "sss1"), _milliseconds(1)),
    *_aliases(("TZ", "TIMEZONE", "TIMEZONE+-"), _long_offset),
    Token("tz",         _zone_name("short")),
    *_aliases(("Timezone", "timezone", "timezone+-"), _zone_name("shortOffset")),
    Token("+-",         _offset),
)


def compile_grammar(tokens: tuple[Token, ...]) -> re.Pattern[str]:
    """Single alternation over ``tokens``; longer spellings are tried first."""
    spellings = sorted((t.spelling for t in tokens), key=len, reverse=True)
    return re.compile("|".join(re.escape(s) for s in spellings))


def compile_rules(tokens: tuple[Token, ...]) -> Mapping[str, RenderFn]:
    return MappingProxyType({t.spelling: t.render for t in tokens})


GRAMMAR: re.Pattern[str] = compile_grammar(TOKENS)
RULES: Mapping[str, RenderFn] = compile_rules(TOKENS)
