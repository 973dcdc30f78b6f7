from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveGrant:
    """Approved leave span; both ends inclusive."""

    employee_id: str
    start_date: Optional[date]
    end_date: Optional[date]


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: str
    leave_type: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    days: Optional[int]
    reason: Optional[str]
    status: LeaveStatus
    approver_user_id: Optional[str] = None
