from __future__ import annotations

import logging
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.localedata import locale_identifiers

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALE_MATCHERS = ("lookup", "best fit")


@lru_cache(maxsize=256)
def resolve_locale(tag: str, matcher: str = "best fit") -> Locale:
    """
    Resolve a BCP 47 / POSIX locale tag to a Babel Locale.

    ``lookup`` truncates subtags from the right until a known locale is
    found; ``best fit`` first lets Babel negotiate against every available
    locale (aliases included) and then falls back to ``lookup``.  Both end at
    DEFAULT_LOCALE.  A structurally invalid tag raises ValueError.
    """
    if matcher not in LOCALE_MATCHERS:
        raise ValueError(f"Unknown locale matcher {matcher!r}; expected one of {LOCALE_MATCHERS}.")

    identifier = str(tag).strip().replace("-", "_")
    try:
        return Locale.parse(identifier)
    except UnknownLocaleError:
        pass

    if matcher == "best fit":
        negotiated = Locale.negotiate([identifier], locale_identifiers())
        if negotiated is not None:
            logger.debug("Locale %r negotiated to %s", tag, negotiated)
            return negotiated

    parts = identifier.split("_")
    while len(parts) > 1:
        parts.pop()
        try:
            found = Locale.parse("_".join(parts))
        except UnknownLocaleError:
            continue
        logger.debug("Locale %r truncated to %s", tag, found)
        return found

    logger.debug("Locale %r unavailable, using %s", tag, DEFAULT_LOCALE)
    return Locale.parse(DEFAULT_LOCALE)
