from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee
from ..model import SalaryBreakup


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def breakup(self, employee: Employee, *, lop_days: float) -> SalaryBreakup:
        raise NotImplementedError
