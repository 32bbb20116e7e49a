from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DayStatus(str, Enum):
    UNAVAILABLE = "unavailable"
    START = "start"
    END = "end"
    IN_RANGE = "in-range"
    AVAILABLE = "available"


@dataclass(frozen=True)
class CalendarDay:
    date: str  # YYYY-MM-DD
    day: int
    status: DayStatus
    connector: str | None = None  # "left-half", "right-half", "full"


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month_index: int  # 0 = January
    month_name: str
    weeks: tuple[tuple[CalendarDay | None, ...], ...]  # Sunday first, None pads
