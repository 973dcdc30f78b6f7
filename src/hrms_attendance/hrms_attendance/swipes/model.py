from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class SwipeRecord:
    """One raw device row: first/last badge swipe of an employee on a day."""

    emp_code: str
    date: date
    first_swipe: Optional[datetime] = None
    last_swipe: Optional[datetime] = None

    @property
    def has_swipe(self) -> bool:
        return self.first_swipe is not None or self.last_swipe is not None
