from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import PayrollRunStatus


@dataclass(frozen=True)
class PayrollRun:
    run_id: str
    month: int
    year: int
    status: PayrollRunStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class SalaryBreakup:
    basic: float
    hra: float
    special: float
    pf: float
    pt: float
    lop: float
    gross: float
    deductions: float
    net: float

    def to_dict(self) -> dict:
        return {
            "BASIC": self.basic,
            "HRA": self.hra,
            "SPECIAL": self.special,
            "PF": self.pf,
            "PT": self.pt,
            "LOP": self.lop,
            "gross": self.gross,
            "deductions": self.deductions,
            "net": self.net,
        }


@dataclass(frozen=True)
class PayrollItem:
    run_id: str
    employee_id: str
    breakup: SalaryBreakup
    lop_days: float
    paid: bool = False
    paid_at: Optional[datetime] = None

    @property
    def gross(self) -> float:
        return self.breakup.gross

    @property
    def deductions(self) -> float:
        return self.breakup.deductions

    @property
    def net(self) -> float:
        return self.breakup.net


@dataclass(frozen=True)
class PayrollComputeResult:
    run_id: str
    items: list[PayrollItem] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {
            "success": True,
            "message": f"Computed payroll for {self.processed} employees",
            "processed": self.processed,
            "totalGross": sum(i.gross for i in self.items),
            "totalDeductions": sum(i.deductions for i in self.items),
            "totalNet": sum(i.net for i in self.items),
        }
