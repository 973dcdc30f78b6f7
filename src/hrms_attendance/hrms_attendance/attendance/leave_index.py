from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import iter_days
from ..leaves.model import LeaveGrant


def materialize_leave_dates(grants: Iterable[LeaveGrant]) -> dict[str, set[date]]:
    """Expand approved leave spans into the set of covered days per employee.

    Both ends are inclusive. Grants with a missing end, or with start after
    end, add no days; they are not rejected because the leave store is not
    validated at this point.
    """

    covered: dict[str, set[date]] = {}
    for grant in grants:
        if grant.start_date is None or grant.end_date is None:
            continue
        days = covered.setdefault(grant.employee_id, set())
        days.update(iter_days(grant.start_date, grant.end_date))
    return covered
