from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import AttendanceCode, AttendanceSource


@dataclass(frozen=True)
class AttendanceStatusRow:
    """One derived attendance status; unique per (employee_id, date)."""

    employee_id: str
    date: date
    status: AttendanceCode
    work_hours: float
    source: AttendanceSource
    remarks: Optional[str] = None


@dataclass(frozen=True)
class ProcessSummary:
    processed_rows: int
    inserted_or_updated: int
    unmatched_emp_codes: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        text = (
            f"Processed {self.processed_rows} rows. "
            f"Updated {self.inserted_or_updated} attendance status records."
        )
        if self.unmatched_emp_codes:
            text += f" Unmatched emp codes: {', '.join(self.unmatched_emp_codes)}"
        return text

    def to_dict(self) -> dict:
        return {
            "success": True,
            "processed_rows": self.processed_rows,
            "inserted_or_updated": self.inserted_or_updated,
            "unmatched_emp_codes": list(self.unmatched_emp_codes),
            "message": self.message,
        }


@dataclass(frozen=True)
class MonthSummary:
    counts: dict[AttendanceCode, int]

    @property
    def lop_days(self) -> float:
        """Loss-of-pay days: every absence plus half of every half day."""
        return self.counts.get(AttendanceCode.ABSENT, 0) + 0.5 * self.counts.get(AttendanceCode.HALF_DAY, 0)

    def to_dict(self) -> dict:
        out: dict = {code.value: self.counts.get(code, 0) for code in AttendanceCode}
        out["lop_days"] = self.lop_days
        return out
