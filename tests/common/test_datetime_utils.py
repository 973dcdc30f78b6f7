from datetime import date, datetime, timezone

import pytest

from src.hrms_attendance.hrms_attendance.common import datetime_utils
from src.hrms_attendance.hrms_attendance.common.datetime_utils import (
    iter_days,
    month_bounds,
    parse_optional_date,
    today_in,
)
from src.hrms_attendance.hrms_attendance.core.exceptions import ValidationError


def test_parse_optional_date_accepts_common_inputs():
    assert parse_optional_date(None, "d") is None
    assert parse_optional_date("", "d") is None
    assert parse_optional_date("2024-04-01", "d") == date(2024, 4, 1)
    assert parse_optional_date(datetime(2024, 4, 1, 23, 0), "d") == date(2024, 4, 1)


def test_parse_optional_date_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_optional_date("2024-13-01", "start_date")


def test_iter_days_empty_when_inverted():
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []


def test_month_bounds_leap_year():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


class LateEveningUtc(datetime):
    """Clock frozen at 2024-04-30 20:00 UTC (already 1 May in India)."""

    @classmethod
    def now(cls, tz=None):
        instant = datetime(2024, 4, 30, 20, 0, tzinfo=timezone.utc)
        return instant.astimezone(tz) if tz else instant.replace(tzinfo=None)


@pytest.mark.parametrize(
    "tz_name, expected",
    [
        ("Asia/Kolkata", date(2024, 5, 1)),
        ("UTC", date(2024, 4, 30)),
    ],
)
def test_today_follows_civil_timezone(monkeypatch, tz_name, expected):
    monkeypatch.setattr(datetime_utils, "datetime", LateEveningUtc)

    assert today_in(tz_name) == expected
