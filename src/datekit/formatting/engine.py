from __future__ import annotations

import re
from typing import TYPE_CHECKING, Mapping

from datekit._exceptions import InvalidSegmentError
from datekit.instant import to_datetime
from datekit.intl import Zone

from .tokens import GRAMMAR, RULES, RenderFn

if TYPE_CHECKING:
    from datekit.config import DateConfig


def format_pattern(
    time: int,
    pattern: str,
    config: DateConfig,
    locale: str | None = None,
    time_zone: Zone = None,
    *,
    grammar: re.Pattern[str] = GRAMMAR,
    rules: Mapping[str, RenderFn] = RULES,
) -> str:
    """
    Replace every token of ``pattern`` with its rendering for ``time``.

    Text the grammar does not match is copied through unchanged.  ``locale``
    falls back to ``config.locale`` and ``time_zone`` to
    ``config.time_zone_origin`` (None being the host-local zone).
    """
    moment = to_datetime(time)
    locale = config.locale if locale is None else locale
    zone = config.time_zone_origin if time_zone is None else time_zone

    def replace(match: re.Match[str]) -> str:
        segment = match.group(0)
        try:
            rule = rules[segment]
        except KeyError:
            raise InvalidSegmentError(segment) from None
        return rule(moment, zone, locale)

    return grammar.sub(replace, pattern)
