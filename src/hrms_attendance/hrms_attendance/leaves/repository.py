from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveGrant, LeaveRequest


class LeaveRepository(Protocol):
    def list_approved_grants(self) -> Sequence[LeaveGrant]:
        """Every Approved request, no date filtering."""

        raise NotImplementedError

    def get_request(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def update_status(
        self,
        *,
        request_id: int,
        status: LeaveStatus,
        approver_user_id: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
