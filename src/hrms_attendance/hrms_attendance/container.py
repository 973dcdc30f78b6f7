from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceStatusRepository
from .attendance.service import AttendanceReconciliationService, AttendanceSummaryService
from .core.constants import DEFAULT_TIMEZONE, HALF_DAY_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService
from .swipes.mysql_swipe_repository import MySQLSwipeRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    swipes_repo: MySQLSwipeRepository
    leaves_repo: MySQLLeaveRepository
    statuses_repo: MySQLAttendanceStatusRepository
    payroll_repo: MySQLPayrollRepository

    reconciliation_service: AttendanceReconciliationService
    summary_service: AttendanceSummaryService
    leave_service: LeaveService
    payroll_service: PayrollService


def build_container(
    *,
    db_config: dict,
    timezone: str = DEFAULT_TIMEZONE,
    half_day_hours: float = HALF_DAY_HOURS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    swipes_repo = MySQLSwipeRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    statuses_repo = MySQLAttendanceStatusRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    reconciliation_service = AttendanceReconciliationService(
        swipes_repo,
        employees_repo,
        leaves_repo,
        statuses_repo,
        timezone=timezone,
        half_day_hours=half_day_hours,
    )
    summary_service = AttendanceSummaryService(statuses_repo)
    leave_service = LeaveService(leaves_repo)
    payroll_service = PayrollService(payroll_repo, employees_repo, statuses_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        swipes_repo=swipes_repo,
        leaves_repo=leaves_repo,
        statuses_repo=statuses_repo,
        payroll_repo=payroll_repo,
        reconciliation_service=reconciliation_service,
        summary_service=summary_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
    )
