from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, fetchone
from .model import LeaveGrant, LeaveRequest
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_grants(self) -> Sequence[LeaveGrant]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, start_date, end_date FROM leave_requests WHERE status=%s",
                (LeaveStatus.APPROVED.value,),
            )
            return [
                LeaveGrant(
                    employee_id=str(r["employee_id"]),
                    start_date=as_date(r.get("start_date")),
                    end_date=as_date(r.get("end_date")),
                )
                for r in fetchall(cur)
            ]

    def get_request(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, type, start_date, end_date, days, reason, status, approver_user_id
                FROM leave_requests
                WHERE id=%s
                """,
                (int(request_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return LeaveRequest(
                request_id=int(r["id"]),
                employee_id=str(r["employee_id"]),
                leave_type=r.get("type"),
                start_date=as_date(r.get("start_date")),
                end_date=as_date(r.get("end_date")),
                days=int(r["days"]) if r.get("days") is not None else None,
                reason=r.get("reason"),
                status=LeaveStatus(r["status"]),
                approver_user_id=r.get("approver_user_id"),
            )

    def update_status(
        self,
        *,
        request_id: int,
        status: LeaveStatus,
        approver_user_id: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if approver_user_id:
                cur.execute(
                    "UPDATE leave_requests SET status=%s, approver_user_id=%s WHERE id=%s",
                    (status.value, approver_user_id, int(request_id)),
                )
            else:
                cur.execute(
                    "UPDATE leave_requests SET status=%s WHERE id=%s",
                    (status.value, int(request_id)),
                )
            return cur.rowcount > 0
