from __future__ import annotations

from collections.abc import Collection

from rental.application.utils.calendar_dates import iter_days
from rental.domain.entities.date_range import DateRange


def is_range_available(date_range: DateRange, unavailable: Collection[str]) -> bool:
    """
    True when no day in [start, end] is blocked.

    A range with an unset endpoint is vacuously available. Every day is
    scanned, so a range straddling a blocked day is rejected even when
    neither endpoint is blocked.
    """
    if not date_range.start or not date_range.end:
        return True
    for day in iter_days(date_range.start, date_range.end):
        if day in unavailable:
            return False
    return True
