"""
tests/test_instant.py

Covers:
  - Coercion of strings, dates, datetimes, numbers and ExtendedDate values
  - Rejection of uncoercible values with InvalidArgumentError
  - Epoch-millisecond to datetime conversion
"""

from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from datekit import ExtendedDate, InvalidArgumentError
from datekit.instant import MAX_TIME, coerce_instant, to_datetime


NEW_YEAR_2024 = 1_704_067_200_000


# ── Accepted values ───────────────────────────────────────────────────────────

class TestCoerce:

    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-01",
            "2024-01-01T00:00:00Z",
            "2024-01-01T00:00:00.000+00:00",
            "2024-01-01T01:00:00+01:00",
            " 2024-01-01T00:00:00z ",
            date(2024, 1, 1),
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            datetime(2023, 12, 31, 19, tzinfo=timezone(timedelta(hours=-5))),
            NEW_YEAR_2024,
            float(NEW_YEAR_2024) + 0.9,
            np.int64(NEW_YEAR_2024),
            np.float64(NEW_YEAR_2024),
        ],
    )
    def test_new_year(self, value):
        assert coerce_instant(value) == NEW_YEAR_2024

    def test_extended_date(self):
        assert coerce_instant(ExtendedDate(NEW_YEAR_2024)) == NEW_YEAR_2024

    def test_naive_datetime_is_host_local(self):
        naive = datetime(2024, 1, 1, 12)
        assert coerce_instant(naive) == coerce_instant(naive.astimezone())

    def test_negative_epoch(self):
        assert coerce_instant("1969-12-31T23:59:59Z") == -1_000


# ── Rejected values ───────────────────────────────────────────────────────────

class TestReject:

    @pytest.mark.parametrize(
        "value",
        ["not-a-date", "", "2024-13-01", None, True, float("nan"), float("inf"),
         MAX_TIME + 1, object(), [2024, 1, 1]],
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidArgumentError) as info:
            coerce_instant(value)
        assert info.value.code == "E_DATE_INVALID_ARGUMENT"
        assert info.value.value is value or info.value.value == value

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            coerce_instant("yesterday")


# ── Conversion back ───────────────────────────────────────────────────────────

class TestToDatetime:

    def test_epoch(self):
        assert to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_milliseconds(self):
        moment = to_datetime(NEW_YEAR_2024 + 6)
        assert moment.microsecond == 6000
        assert moment.tzinfo is not None
