"""
datekit.formatting
~~~~~~~~~~~~~~~~~~

Token-driven formatting.  A pattern such as ``"YYYY-MM-DD HH:mm:ss"`` is
scanned with a single compiled alternation; every recognised token is
replaced by a locale- and zone-aware rendering, everything else is kept
verbatim.

Basic usage::

    from datekit import ExtendedDate

    d = ExtendedDate("2024-07-04T14:04:05.006Z")
    d.format("YYYY-MM-DD HH:mm:ss.ms", time_zone="UTC")   # → '2024-07-04 14:04:05.006'
    d.format("WEEKDAY DD1 MONTH", locale="fr")            # → 'jeudi 4 juillet'

Token families (upper case = long / fixed width, lower case = compact,
trailing ``1`` = unpadded)::

    DATETIME Datetime datetime (+-)   DATE Date date   TIME+- TIME Time time
    YEAR YYYY year yy   MONTH month Month1 MM MM1   WEEKDAY DAY weekday day
    Weekday1 Day1   DD DD1   HH HH1 H11 H12 H23 H24 h11 h12 h23 h24
    mm ii mm1 ii1   ss ss1   ms sss ms1 sss1   TZ TIMEZONE(+-) tz
    Timezone timezone(+-)   +-

Public API
----------
format_pattern  Render a pattern for an epoch-millisecond instant.
Token           A (spelling, render rule) record.
TOKENS          The token table; GRAMMAR and RULES are derived from it.
"""

from __future__ import annotations

from datekit.formatting.engine import format_pattern
from datekit.formatting.tokens import (
    GRAMMAR,
    RULES,
    TOKENS,
    Token,
    compile_grammar,
    compile_rules,
)

__all__ = [
    "GRAMMAR",
    "RULES",
    "TOKENS",
    "Token",
    "compile_grammar",
    "compile_rules",
    "format_pattern",
]
