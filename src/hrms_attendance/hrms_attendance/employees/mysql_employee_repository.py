from __future__ import annotations

from typing import Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall
from .model import Employee, EmployeeIdentity
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = "id, emp_code, full_name, status, monthly_ctc, pf_applicable, pt_state"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        emp_code=r["emp_code"],
        full_name=r["full_name"],
        status=EmployeeStatus(r["status"]),
        monthly_ctc=as_float(r.get("monthly_ctc")),
        pf_applicable=bool(r.get("pf_applicable")),
        pt_state=r.get("pt_state"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_identities(self) -> Sequence[EmployeeIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, emp_code FROM employees")
            return [
                EmployeeIdentity(emp_code=r["emp_code"], employee_id=str(r["id"]))
                for r in fetchall(cur)
            ]

    def list_by_status(self, status: EmployeeStatus) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE status=%s ORDER BY emp_code",
                (status.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]
