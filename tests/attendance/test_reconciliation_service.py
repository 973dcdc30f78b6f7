from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

import pytest

from src.hrms_attendance.hrms_attendance.attendance.model import AttendanceStatusRow
from src.hrms_attendance.hrms_attendance.attendance.service import AttendanceReconciliationService
from src.hrms_attendance.hrms_attendance.common import datetime_utils
from src.hrms_attendance.hrms_attendance.core.enums import AttendanceCode, AttendanceSource
from src.hrms_attendance.hrms_attendance.core.exceptions import ValidationError
from src.hrms_attendance.hrms_attendance.employees.model import EmployeeIdentity
from src.hrms_attendance.hrms_attendance.leaves.model import LeaveGrant
from src.hrms_attendance.hrms_attendance.swipes.model import SwipeRecord


@dataclass
class InMemorySwipes:
    rows: list[SwipeRecord]
    last_window: tuple[date, date] | None = None

    def list_between(self, *, start_date: date, end_date: date):
        self.last_window = (start_date, end_date)
        return [r for r in self.rows if start_date <= r.date <= end_date]


@dataclass
class InMemoryEmployees:
    codes: dict[str, str]

    def list_identities(self):
        return [EmployeeIdentity(emp_code=c, employee_id=i) for c, i in self.codes.items()]


@dataclass
class InMemoryLeaves:
    grants: list[LeaveGrant] = field(default_factory=list)

    def list_approved_grants(self):
        return list(self.grants)


class InMemoryStatuses:
    def __init__(self):
        self.by_key: dict[tuple[str, date], AttendanceStatusRow] = {}
        self.calls = 0

    def upsert_many(self, rows):
        self.calls += 1
        for r in rows:
            self.by_key[(r.employee_id, r.date)] = r
        return len(rows)


class BrokenStore:
    def __init__(self, message: str):
        self.message = message

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError(self.message)

        return fail


def _utc(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc)


def _service(swipes, codes, grants=(), statuses=None, today=date(2024, 4, 30)):
    statuses = statuses if statuses is not None else InMemoryStatuses()
    svc = AttendanceReconciliationService(
        swipes if not isinstance(swipes, list) else InMemorySwipes(swipes),
        InMemoryEmployees(codes) if isinstance(codes, dict) else codes,
        InMemoryLeaves(list(grants)) if not isinstance(grants, BrokenStore) else grants,
        statuses,
        today=lambda: today,
    )
    return svc, statuses


def test_end_to_end_present_row():
    d = date(2024, 4, 1)
    svc, statuses = _service(
        [SwipeRecord(emp_code="E1", date=d, first_swipe=_utc(d, 9), last_swipe=_utc(d, 17, 30))],
        {"E1": "id-123"},
    )

    summary = svc.process("2024-04-01", "2024-04-01")

    row = statuses.by_key[("id-123", d)]
    assert row.status == AttendanceCode.PRESENT
    assert row.work_hours == pytest.approx(8.5)
    assert row.source == AttendanceSource.DEVICE
    assert summary.processed_rows == 1
    assert summary.inserted_or_updated == 1
    assert summary.unmatched_emp_codes == []
    assert summary.message == "Processed 1 rows. Updated 1 attendance status records."


def test_leave_precedence_over_swipes():
    d = date(2024, 4, 2)
    svc, statuses = _service(
        [SwipeRecord(emp_code="E1", date=d, first_swipe=_utc(d, 9), last_swipe=_utc(d, 18))],
        {"E1": "id-123"},
        grants=[LeaveGrant(employee_id="id-123", start_date=date(2024, 4, 1), end_date=date(2024, 4, 3))],
    )

    svc.process("2024-04-01", "2024-04-30")

    assert statuses.by_key[("id-123", d)].status == AttendanceCode.LEAVE
    assert statuses.by_key[("id-123", d)].source == AttendanceSource.LEAVE


def test_unmatched_codes_are_reported_once_and_skipped():
    d1, d2 = date(2024, 4, 1), date(2024, 4, 2)
    svc, statuses = _service(
        [
            SwipeRecord(emp_code="X9", date=d1),
            SwipeRecord(emp_code="E1", date=d1),
            SwipeRecord(emp_code="X9", date=d2),
        ],
        {"E1": "id-123"},
    )

    summary = svc.process("2024-04-01", "2024-04-02")

    assert summary.unmatched_emp_codes == ["X9"]
    assert summary.processed_rows == 3
    assert summary.inserted_or_updated == 1
    assert list(statuses.by_key) == [("id-123", d1)]
    assert summary.message.endswith("Unmatched emp codes: X9")


def test_second_run_is_idempotent():
    d = date(2024, 4, 1)
    svc, statuses = _service(
        [SwipeRecord(emp_code="E1", date=d, first_swipe=_utc(d, 9), last_swipe=_utc(d, 11))],
        {"E1": "id-123"},
    )

    svc.process("2024-04-01", "2024-04-30")
    first = dict(statuses.by_key)
    svc.process("2024-04-01", "2024-04-30")

    assert statuses.by_key == first
    assert len(statuses.by_key) == 1


def test_default_window_is_trailing_31_days():
    swipes = InMemorySwipes([])
    svc, statuses = _service(swipes, {}, today=date(2024, 4, 30))

    summary = svc.process()

    assert swipes.last_window == (date(2024, 3, 30), date(2024, 4, 30))
    assert summary.processed_rows == 0
    assert statuses.calls == 0


def test_window_with_only_one_date_falls_back_to_default():
    swipes = InMemorySwipes([])
    svc, _ = _service(swipes, {}, today=date(2024, 4, 30))

    svc.process("2024-01-01", None)

    assert swipes.last_window == (date(2024, 3, 30), date(2024, 4, 30))


def test_inverted_window_is_an_empty_run():
    swipes = InMemorySwipes([SwipeRecord(emp_code="E1", date=date(2024, 4, 5))])
    svc, statuses = _service(swipes, {"E1": "id-123"})

    summary = svc.process("2024-04-10", "2024-04-01")

    assert swipes.last_window == (date(2024, 4, 10), date(2024, 4, 1))
    assert summary.processed_rows == 0
    assert summary.inserted_or_updated == 0
    assert summary.unmatched_emp_codes == []
    assert statuses.calls == 0


def test_bad_date_format_is_rejected():
    svc, _ = _service([], {})

    with pytest.raises(ValidationError):
        svc.process("01/04/2024", "2024-04-10")


def test_read_failure_aborts_before_any_write():
    d = date(2024, 4, 1)
    svc, statuses = _service(
        [SwipeRecord(emp_code="E1", date=d)],
        {"E1": "id-123"},
        grants=BrokenStore("leave store unavailable"),
    )

    with pytest.raises(RuntimeError, match="leave store unavailable"):
        svc.process("2024-04-01", "2024-04-01")
    assert statuses.calls == 0


def test_upsert_failure_propagates():
    d = date(2024, 4, 1)
    svc, _ = _service(
        [SwipeRecord(emp_code="E1", date=d)],
        {"E1": "id-123"},
        statuses=BrokenStore("duplicate key"),
    )

    with pytest.raises(RuntimeError, match="duplicate key"):
        svc.process("2024-04-01", "2024-04-01")


class LateEveningUtc(datetime):
    @classmethod
    def now(cls, tz=None):
        instant = datetime(2024, 4, 30, 20, 0, tzinfo=timezone.utc)
        return instant.astimezone(tz) if tz else instant.replace(tzinfo=None)


@pytest.mark.parametrize(
    "tz_name, window",
    [
        ("Asia/Kolkata", (date(2024, 3, 31), date(2024, 5, 1))),
        ("UTC", (date(2024, 3, 30), date(2024, 4, 30))),
    ],
)
def test_default_window_uses_configured_timezone(monkeypatch, tz_name, window):
    monkeypatch.setattr(datetime_utils, "datetime", LateEveningUtc)
    swipes = InMemorySwipes([])
    svc = AttendanceReconciliationService(
        swipes,
        InMemoryEmployees({}),
        InMemoryLeaves(),
        InMemoryStatuses(),
        timezone=tz_name,
    )

    svc.process()

    assert swipes.last_window == window
