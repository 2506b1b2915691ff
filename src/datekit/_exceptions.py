from __future__ import annotations

from typing import Any


class DateError(Exception):
    """Base exception for all datekit errors.

    Every error carries a stable machine-readable ``code`` and a ``context``
    dict with the offending input.
    """

    code: str = "E_DATE"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context


class InvalidArgumentError(DateError, ValueError):
    code = "E_DATE_INVALID_ARGUMENT"

    def __init__(self, value: Any) -> None:
        super().__init__(f"Could not coerce {value!r} to a valid instant.", value=value)
        self.value = value


class InvalidSegmentError(DateError, LookupError):
    code = "E_DATE_INVALID_SEGMENT"

    def __init__(self, segment: str) -> None:
        super().__init__(f"No render rule for format segment {segment!r}.", segment=segment)
        self.segment = segment
