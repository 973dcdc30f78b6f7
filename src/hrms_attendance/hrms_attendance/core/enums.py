from __future__ import annotations

from enum import Enum


class AttendanceCode(str, Enum):
    """Per-day attendance status stored in attendance_status."""

    PRESENT = "P"
    ABSENT = "A"
    HALF_DAY = "HD"
    LEAVE = "L"
    ON_DUTY = "OD"
    WORK_FROM_HOME = "WFH"


class AttendanceSource(str, Enum):
    """Where a derived status came from."""

    DEVICE = "device"
    LEAVE = "leave"
    NONE = "none"


class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    TERMINATED = "Terminated"


class PayrollRunStatus(str, Enum):
    DRAFT = "Draft"
    COMPUTED = "Computed"
    LOCKED = "Locked"
