from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import SwipeRecord


class SwipeRepository(Protocol):
    def list_between(self, *, start_date: date, end_date: date) -> Sequence[SwipeRecord]:
        """All uploaded swipe rows with start_date <= date <= end_date."""

        raise NotImplementedError
