from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollRunStatus
from .model import PayrollItem, PayrollRun


class PayrollRepository(Protocol):
    def get_run(self, run_id: str) -> Optional[PayrollRun]:
        raise NotImplementedError

    def upsert_items(self, items: Sequence[PayrollItem]) -> int:
        """Insert or overwrite items keyed by (run_id, employee_id)."""

        raise NotImplementedError

    def set_run_status(self, *, run_id: str, status: PayrollRunStatus) -> bool:
        raise NotImplementedError

    def mark_item_paid(
        self,
        *,
        item_id: int,
        evidence_url: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
