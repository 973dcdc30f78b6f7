from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import hours_between
from ..core.constants import HALF_DAY_HOURS
from ..core.enums import AttendanceCode, AttendanceSource
from ..swipes.model import SwipeRecord


@dataclass(frozen=True)
class ReconciliationContext:
    """Read-only snapshot used for one reconciliation run.

    Holds the employee directory (emp_code -> employee_id) and the materialized
    approved-leave calendar (employee_id -> covered days).
    """

    employee_ids: Mapping[str, str]
    leave_dates: Mapping[str, frozenset[date] | set[date]] = field(default_factory=dict)
    half_day_hours: float = HALF_DAY_HOURS

    def resolve(self, emp_code: str) -> Optional[str]:
        return self.employee_ids.get(emp_code)

    def on_leave(self, employee_id: str, day: date) -> bool:
        return day in self.leave_dates.get(employee_id, ())


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceCode
    source: AttendanceSource
    work_hours: float = 0.0


def derive_status(record: SwipeRecord, employee_id: str, context: ReconciliationContext) -> StatusDecision:
    """Decide the day's status; first matching rule wins.

    1. approved leave covers the day -> Leave
    2. any swipe present -> HalfDay under the threshold, Present otherwise
    3. otherwise -> Absent
    """

    if context.on_leave(employee_id, record.date):
        return StatusDecision(status=AttendanceCode.LEAVE, source=AttendanceSource.LEAVE)

    if record.has_swipe:
        # A lone swipe is measured against itself: 0 hours, hence HalfDay.
        first = record.first_swipe or record.last_swipe
        last = record.last_swipe or record.first_swipe
        hours = hours_between(first, last)
        status = AttendanceCode.HALF_DAY if hours < context.half_day_hours else AttendanceCode.PRESENT
        return StatusDecision(status=status, source=AttendanceSource.DEVICE, work_hours=hours)

    return StatusDecision(status=AttendanceCode.ABSENT, source=AttendanceSource.NONE)
