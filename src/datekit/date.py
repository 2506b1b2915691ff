from __future__ import annotations

from datetime import datetime
from functools import total_ordering
from typing import Any, Mapping

from .config import DateConfig
from .formatting import format_pattern
from .instant import coerce_instant, now, to_datetime
from .intl import Zone, render, resolve_zone
from .relative import time_difference
from .zones import shift_time_zone


@total_ordering
class ExtendedDate:
    """
    An epoch-millisecond instant decorated with relative-time phrasing,
    timezone shifting and token formatting.

    The instant is mutable (``set_time``, ``shift_time_zone``); the config
    binding is not, although the config's own fields are.
    """

    __slots__ = ("_time", "_config")

    def __init__(
        self,
        value: Any = None,
        config: DateConfig | Mapping[str, Any] | None = None,
    ) -> None:
        self._time: int = now() if value is None else coerce_instant(value)

        if config is None:
            config = DateConfig()
        elif isinstance(config, DateConfig):
            config = config.copy()
        else:
            config = DateConfig.from_mapping(config)
        self._config: DateConfig = config

    # ── instant access ───────────────────────────────────────────────────

    @property
    def config(self) -> DateConfig:
        return self._config

    def get_time(self) -> int:
        return self._time

    def set_time(self, value: Any) -> ExtendedDate:
        self._time = coerce_instant(value)
        return self

    @property
    def milliseconds(self) -> int:
        return self._time % 1000

    def to_datetime(self, time_zone: Zone = "UTC") -> datetime:
        return to_datetime(self._time).astimezone(resolve_zone(time_zone))

    def to_iso_string(self) -> str:
        moment = to_datetime(self._time)
        return f"{moment.year:04d}-{moment:%m-%dT%H:%M:%S}.{self.milliseconds:03d}Z"

    def to_locale_string(self, locale: str | None = None, time_zone: Zone = None) -> str:
        return render(
            locale if locale is not None else self._config.locale,
            to_datetime(self._time),
            {
                "timeZone": time_zone if time_zone is not None else self._config.time_zone_origin,
                "dateStyle": "short",
                "timeStyle": "medium",
            },
        )

    def copy(self) -> ExtendedDate:
        return ExtendedDate(self._time, self._config)

    # ── decorations ──────────────────────────────────────────────────────

    def time_difference(self, other: Any) -> str:
        return time_difference(self._time, other, self._config)

    def shift_time_zone(self, origin: Zone = None, target: Zone = None) -> ExtendedDate:
        self._time = shift_time_zone(
            self._time,
            origin if origin is not None else self._config.time_zone_origin,
            target if target is not None else self._config.time_zone_target,
        )
        return self

    def format(self, pattern: str, locale: str | None = None, time_zone: Zone = None) -> str:
        return format_pattern(self._time, pattern, self._config, locale, time_zone)

    # ── comparison / repr ────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtendedDate):
            return NotImplemented
        return self._time == other._time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExtendedDate):
            return NotImplemented
        return self._time < other._time

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ExtendedDate({self.to_iso_string()!r}, config={self._config!r})"
