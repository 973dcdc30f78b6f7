from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceStatusRow


class AttendanceStatusRepository(Protocol):
    def upsert_many(self, rows: Sequence[AttendanceStatusRow]) -> int:
        """Insert or overwrite rows keyed by (employee_id, date) in one call."""

        raise NotImplementedError

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceStatusRow]:
        raise NotImplementedError
