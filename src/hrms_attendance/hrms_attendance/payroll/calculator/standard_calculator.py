from __future__ import annotations

from ...core.constants import (
    BASIC_SHARE,
    DAYS_PER_PAYROLL_MONTH,
    HRA_SHARE_OF_BASIC,
    PF_CAP,
    PF_RATE,
    PROFESSIONAL_TAX,
)
from ...employees.model import Employee
from ..model import SalaryBreakup
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: CTC split 40% basic, 40% of basic as HRA, rest special.

    Deductions are PF (12% of basic, capped), a flat professional tax and
    loss of pay at CTC/30 per LOP day. Net never goes below 0.
    """

    def breakup(self, employee: Employee, *, lop_days: float) -> SalaryBreakup:
        ctc = float(employee.monthly_ctc or 0)
        lop = ctc / DAYS_PER_PAYROLL_MONTH * lop_days

        basic = ctc * BASIC_SHARE
        hra = basic * HRA_SHARE_OF_BASIC
        special = ctc - basic - hra

        pf = min(basic * PF_RATE, PF_CAP) if employee.pf_applicable else 0.0
        # same rate for every state for now
        pt = PROFESSIONAL_TAX

        deductions = pf + pt + lop
        return SalaryBreakup(
            basic=basic,
            hra=hra,
            special=special,
            pf=pf,
            pt=pt,
            lop=lop,
            gross=ctc,
            deductions=deductions,
            net=max(0.0, ctc - deductions),
        )
