from __future__ import annotations

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import month_bounds, parse_optional_date, today_in
from ..common.validators import require_int_in_range, require_non_empty
from ..core.constants import DEFAULT_TIMEZONE, DEFAULT_WINDOW_DAYS, HALF_DAY_HOURS
from ..core.enums import AttendanceCode
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..swipes.repository import SwipeRepository
from .derivation import ReconciliationContext, derive_status
from .leave_index import materialize_leave_dates
from .model import AttendanceStatusRow, MonthSummary, ProcessSummary
from .repository import AttendanceStatusRepository

logger = logging.getLogger(__name__)


class AttendanceReconciliationService:
    """Turns raw device swipes plus approved leave into per-day statuses.

    One run reads everything up front, derives every row in memory and writes
    the batch with a single upsert at the end. A read failure therefore leaves
    attendance_status untouched; a write failure is raised as-is, no retry.
    """

    def __init__(
        self,
        swipes: SwipeRepository,
        employees: EmployeeRepository,
        leaves: LeaveRepository,
        statuses: AttendanceStatusRepository,
        *,
        timezone: str = DEFAULT_TIMEZONE,
        window_days: int = DEFAULT_WINDOW_DAYS,
        half_day_hours: float = HALF_DAY_HOURS,
        today: Optional[Callable[[], date]] = None,
    ):
        self._swipes = swipes
        self._employees = employees
        self._leaves = leaves
        self._statuses = statuses
        self._timezone = timezone
        self._window_days = int(window_days)
        self._half_day_hours = float(half_day_hours)
        self._today = today or (lambda: today_in(self._timezone))

    def resolve_window(self, start_date=None, end_date=None) -> tuple[date, date]:
        """Explicit dates win when both are given; an inverted pair simply selects no rows."""
        start = parse_optional_date(start_date, "start_date")
        end = parse_optional_date(end_date, "end_date")
        if start is None or end is None:
            end = self._today()
            start = end - timedelta(days=self._window_days)
        return start, end

    def build_context(self) -> ReconciliationContext:
        employee_ids = {e.emp_code: e.employee_id for e in self._employees.list_identities()}
        leave_dates = materialize_leave_dates(self._leaves.list_approved_grants())
        return ReconciliationContext(
            employee_ids=employee_ids,
            leave_dates=leave_dates,
            half_day_hours=self._half_day_hours,
        )

    def process(self, start_date=None, end_date=None) -> ProcessSummary:
        start, end = self.resolve_window(start_date, end_date)
        logger.info("Processing attendance from %s to %s", start, end)

        records = self._swipes.list_between(start_date=start, end_date=end)
        logger.info("Found %s attendance upload records", len(records))
        context = self.build_context()

        rows: list[AttendanceStatusRow] = []
        unmatched: dict[str, None] = {}
        for record in records:
            employee_id = context.resolve(record.emp_code)
            if not employee_id:
                unmatched.setdefault(record.emp_code, None)
                continue
            decision = derive_status(record, employee_id, context)
            rows.append(
                AttendanceStatusRow(
                    employee_id=employee_id,
                    date=record.date,
                    status=decision.status,
                    work_hours=decision.work_hours,
                    source=decision.source,
                )
            )

        if unmatched:
            logger.warning("Unmatched emp codes: %s", ", ".join(unmatched))

        written = self._statuses.upsert_many(rows) if rows else 0
        logger.info("Upserted %s attendance status records", written)

        return ProcessSummary(
            processed_rows=len(records),
            inserted_or_updated=written,
            unmatched_emp_codes=list(unmatched),
        )


class AttendanceSummaryService:
    def __init__(self, statuses: AttendanceStatusRepository):
        self._statuses = statuses

    def month_summary(self, *, employee_id, month, year) -> MonthSummary:
        employee_id = require_non_empty(employee_id, "employee_id")
        month = require_int_in_range(month, "month", 1, 12)
        year = require_int_in_range(year, "year", 1900, 9999)

        start, end = month_bounds(year, month)
        rows = self._statuses.list_between(start_date=start, end_date=end, employee_id=employee_id)
        counts = Counter(r.status for r in rows)
        logger.debug("Attendance summary for %s %02d/%s: %s", employee_id, month, year, dict(counts))
        return MonthSummary(counts={code: counts.get(code, 0) for code in AttendanceCode})
