from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping


# camelCase option names, mapped onto DateConfig fields.
_ALIASES: dict[str, str] = {
    "localeMatcher": "locale_matcher",
    "quarter": "include_quarter_unit",
    "includeQuarterUnit": "include_quarter_unit",
    "week": "include_week_unit",
    "includeWeekUnit": "include_week_unit",
    "timeZoneOrigin": "time_zone_origin",
    "timeZoneTarget": "time_zone_target",
}

# Fields that may legitimately hold None (None = host-local zone).
_NULLABLE = frozenset({"time_zone_origin"})


@dataclass(eq=True, slots=True)
class DateConfig:
    """
    Formatting and locale defaults owned by a single ExtendedDate.

    Writes are not validated; an unknown locale or zone only fails once the
    formatting service consumes it.  Assigning None to any field other than
    ``time_zone_origin`` resets that field to its default.
    """

    locale: str = "en"
    locale_matcher: str = "best fit"
    style: str = "long"
    numeric: str = "auto"
    include_quarter_unit: bool = False
    include_week_unit: bool = True
    time_zone_origin: str | None = None
    time_zone_target: str = "UTC"

    def __setattr__(self, name: str, value: Any) -> None:
        if value is None and name not in _NULLABLE:
            value = _DEFAULTS[name]
        object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> DateConfig:
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in names:
                raise TypeError(f"Unknown DateConfig option {key!r}.")
            kwargs[name] = value
        return cls(**kwargs)

    def copy(self) -> DateConfig:
        return dataclasses.replace(self)

    @property
    def token_table(self) -> tuple:
        from datekit.formatting.tokens import TOKENS  # circular at import time
        return TOKENS


_DEFAULTS: dict[str, Any] = {
    f.name: f.default for f in dataclasses.fields(DateConfig)
}
