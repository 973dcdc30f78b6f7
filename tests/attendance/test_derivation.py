from datetime import date, datetime, timezone

import pytest

from src.hrms_attendance.hrms_attendance.attendance.derivation import ReconciliationContext, derive_status
from src.hrms_attendance.hrms_attendance.core.enums import AttendanceCode, AttendanceSource
from src.hrms_attendance.hrms_attendance.swipes.model import SwipeRecord

DAY = date(2024, 4, 1)


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 4, 1, hour, minute, tzinfo=timezone.utc)


def _context(leave_days=()):
    return ReconciliationContext(employee_ids={"E1": "id-123"}, leave_dates={"id-123": set(leave_days)})


def test_leave_wins_over_swipes():
    record = SwipeRecord(emp_code="E1", date=DAY, first_swipe=_at(9), last_swipe=_at(18))

    decision = derive_status(record, "id-123", _context([DAY]))

    assert decision.status == AttendanceCode.LEAVE
    assert decision.source == AttendanceSource.LEAVE
    assert decision.work_hours == 0


@pytest.mark.parametrize(
    "last, expected",
    [
        (_at(12, 59), AttendanceCode.HALF_DAY),
        (_at(13, 0), AttendanceCode.PRESENT),
    ],
)
def test_half_day_threshold_is_exclusive(last, expected):
    record = SwipeRecord(emp_code="E1", date=DAY, first_swipe=_at(9), last_swipe=last)

    decision = derive_status(record, "id-123", _context())

    assert decision.status == expected
    assert decision.source == AttendanceSource.DEVICE


def test_work_hours_are_absolute_difference():
    record = SwipeRecord(emp_code="E1", date=DAY, first_swipe=_at(17, 30), last_swipe=_at(9))

    decision = derive_status(record, "id-123", _context())

    assert decision.work_hours == pytest.approx(8.5)
    assert decision.status == AttendanceCode.PRESENT


def test_single_swipe_counts_as_zero_hours():
    record = SwipeRecord(emp_code="E1", date=DAY, first_swipe=_at(9))

    decision = derive_status(record, "id-123", _context())

    assert decision.work_hours == 0
    assert decision.status == AttendanceCode.HALF_DAY
    assert decision.source == AttendanceSource.DEVICE


def test_no_swipe_no_leave_is_absent():
    record = SwipeRecord(emp_code="E1", date=DAY)

    decision = derive_status(record, "id-123", _context())

    assert decision.status == AttendanceCode.ABSENT
    assert decision.source == AttendanceSource.NONE
    assert decision.work_hours == 0


def test_leave_on_other_day_does_not_apply():
    record = SwipeRecord(emp_code="E1", date=DAY)

    decision = derive_status(record, "id-123", _context([date(2024, 4, 2)]))

    assert decision.status == AttendanceCode.ABSENT
