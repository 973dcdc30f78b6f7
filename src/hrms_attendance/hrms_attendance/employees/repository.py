from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee, EmployeeIdentity


class EmployeeRepository(Protocol):
    def list_identities(self) -> Sequence[EmployeeIdentity]:
        """Full (emp_code, id) snapshot, no filtering."""

        raise NotImplementedError

    def list_by_status(self, status: EmployeeStatus) -> Sequence[Employee]:
        raise NotImplementedError
