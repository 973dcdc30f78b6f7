from __future__ import annotations

import json

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import PayrollRunStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import PayrollItem, PayrollRun
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_run(self, run_id: str) -> Optional[PayrollRun]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT run_id, month, year, status, notes FROM payroll_runs WHERE run_id=%s",
                (run_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PayrollRun(
                run_id=r["run_id"],
                month=int(r["month"]),
                year=int(r["year"]),
                status=PayrollRunStatus(r["status"]),
                notes=r.get("notes"),
            )

    def upsert_items(self, items: Sequence[PayrollItem]) -> int:
        if not items:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO payroll_items(run_id, employee_id, gross, deductions, net, lop_days, breakup_json, paid)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    gross=VALUES(gross),
                    deductions=VALUES(deductions),
                    net=VALUES(net),
                    lop_days=VALUES(lop_days),
                    breakup_json=VALUES(breakup_json),
                    paid=VALUES(paid)
                """,
                [
                    (
                        i.run_id,
                        i.employee_id,
                        round(i.gross, 2),
                        round(i.deductions, 2),
                        round(i.net, 2),
                        i.lop_days,
                        json.dumps(i.breakup.to_dict()),
                        int(i.paid),
                    )
                    for i in items
                ],
            )
        return len(items)

    def set_run_status(self, *, run_id: str, status: PayrollRunStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE payroll_runs SET status=%s WHERE run_id=%s", (status.value, run_id))
            return cur.rowcount > 0

    def mark_item_paid(
        self,
        *,
        item_id: int,
        evidence_url: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll_items
                SET paid=1, paid_at=%s, evidence_url=%s, remarks=%s
                WHERE id=%s
                """,
                (now_local(), evidence_url, remarks, int(item_id)),
            )
            return cur.rowcount > 0
