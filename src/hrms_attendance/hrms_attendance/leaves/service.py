from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def compute_leave_days(start: Optional[date], end: Optional[date]) -> int:
    """Inclusive calendar days between two dates.

    A missing date counts as a single-day leave, and the result never drops
    below 1 (an inverted range is treated as one day).
    """

    if start is None or end is None:
        return 1
    return max((end - start).days + 1, 1)


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def compute_days(self, start: Optional[date], end: Optional[date]) -> int:
        days = compute_leave_days(start, end)
        logger.debug("Computed %s leave day(s) for %s..%s", days, start, end)
        return days

    def set_status(
        self,
        *,
        request_id,
        status,
        approver_user_id: Optional[str] = None,
    ) -> LeaveRequest:
        if request_id in (None, "") or status in (None, ""):
            raise ValidationError("id and status are required")
        try:
            new_status = LeaveStatus(status)
        except ValueError:
            raise ValidationError("Invalid status. Must be Approved, Rejected, or Pending")
        try:
            request_id = int(request_id)
        except (TypeError, ValueError):
            raise ValidationError("id must be an integer")

        if not self._leaves.get_request(request_id):
            raise NotFoundError(f"Leave request {request_id} not found")

        # approver is only recorded on a decision
        approver = approver_user_id if new_status != LeaveStatus.PENDING else None
        self._leaves.update_status(request_id=request_id, status=new_status, approver_user_id=approver or None)
        logger.info("Leave request %s set to %s", request_id, new_status.value)

        updated = self._leaves.get_request(request_id)
        if not updated:
            raise NotFoundError(f"Leave request {request_id} not found")
        return updated
