from __future__ import annotations

import logging
from collections import defaultdict
from typing import Optional

from ..attendance.repository import AttendanceStatusRepository
from ..common.datetime_utils import month_bounds
from ..common.validators import require_non_empty
from ..core.enums import AttendanceCode, EmployeeStatus, PayrollRunStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollComputeResult, PayrollItem
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        statuses: AttendanceStatusRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._statuses = statuses
        self._calculator = calculator or StandardPayrollCalculator()

    def _lop_days_by_employee(self, year: int, month: int) -> dict[str, float]:
        start, end = month_bounds(year, month)
        lop: dict[str, float] = defaultdict(float)
        for row in self._statuses.list_between(start_date=start, end_date=end):
            if row.status == AttendanceCode.ABSENT:
                lop[row.employee_id] += 1
            elif row.status == AttendanceCode.HALF_DAY:
                lop[row.employee_id] += 0.5
        return lop

    def compute_run(self, run_id) -> PayrollComputeResult:
        if not run_id:
            raise ValidationError("runId is required")
        run_id = str(run_id)

        run = self._payroll.get_run(run_id)
        if not run:
            raise NotFoundError("Payroll run not found")

        employees = self._employees.list_by_status(EmployeeStatus.ACTIVE)
        logger.info("Computing payroll for run %s (%02d/%s), %s employees", run_id, run.month, run.year, len(employees))
        lop_days = self._lop_days_by_employee(run.year, run.month)

        items = [
            PayrollItem(
                run_id=run_id,
                employee_id=e.employee_id,
                breakup=self._calculator.breakup(e, lop_days=lop_days.get(e.employee_id, 0.0)),
                lop_days=lop_days.get(e.employee_id, 0.0),
            )
            for e in employees
        ]

        if items:
            self._payroll.upsert_items(items)
        self._payroll.set_run_status(run_id=run_id, status=PayrollRunStatus.COMPUTED)
        logger.info("Created %s payroll items for run %s", len(items), run_id)
        return PayrollComputeResult(run_id=run_id, items=items)

    def mark_paid(self, *, item_id, evidence_url: Optional[str] = None, remarks: Optional[str] = None) -> None:
        try:
            item_id = int(require_non_empty(item_id, "item_id"))
        except ValueError:
            raise ValidationError("item_id must be an integer")

        ok = self._payroll.mark_item_paid(
            item_id=item_id,
            evidence_url=(evidence_url or "").strip() or None,
            remarks=(remarks or "").strip() or None,
        )
        if not ok:
            raise NotFoundError(f"Payroll item {item_id} not found")
        logger.info("Payroll item %s marked as paid", item_id)
