from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall
from .model import SwipeRecord
from .repository import SwipeRepository


class MySQLSwipeRepository(SwipeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[SwipeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT emp_code, date, first_swipe, last_swipe
                FROM attendance_upload
                WHERE date BETWEEN %s AND %s
                ORDER BY date ASC, emp_code ASC
                """,
                (start_date, end_date),
            )
            return [
                SwipeRecord(
                    emp_code=r["emp_code"],
                    date=as_date(r["date"]),
                    first_swipe=r.get("first_swipe"),
                    last_swipe=r.get("last_swipe"),
                )
                for r in fetchall(cur)
            ]
