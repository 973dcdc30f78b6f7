from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class EmployeeIdentity:
    """Directory entry: badge/employee code to internal id."""

    emp_code: str
    employee_id: str


@dataclass(frozen=True)
class Employee:
    employee_id: str
    emp_code: str
    full_name: str
    status: EmployeeStatus
    monthly_ctc: float = 0.0
    pf_applicable: bool = False
    pt_state: Optional[str] = None
