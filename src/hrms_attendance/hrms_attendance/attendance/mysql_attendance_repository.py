from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceCode, AttendanceSource
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchall
from .model import AttendanceStatusRow
from .repository import AttendanceStatusRepository


class MySQLAttendanceStatusRepository(AttendanceStatusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_many(self, rows: Sequence[AttendanceStatusRow]) -> int:
        if not rows:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_status(employee_id, date, status, work_hours, source, remarks)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status),
                    work_hours=VALUES(work_hours),
                    source=VALUES(source),
                    remarks=VALUES(remarks)
                """,
                [
                    (r.employee_id, r.date, r.status.value, round(r.work_hours, 2), r.source.value, r.remarks)
                    for r in rows
                ],
            )
        return len(rows)

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceStatusRow]:
        clauses = ["date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, date, status, work_hours, source, remarks
                FROM attendance_status
                WHERE {" AND ".join(clauses)}
                ORDER BY date ASC, employee_id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceStatusRow(
                    employee_id=str(r["employee_id"]),
                    date=as_date(r["date"]),
                    status=AttendanceCode(r["status"]),
                    work_hours=as_float(r.get("work_hours")),
                    source=AttendanceSource(r.get("source") or AttendanceSource.NONE.value),
                    remarks=r.get("remarks"),
                )
                for r in fetchall(cur)
            ]
