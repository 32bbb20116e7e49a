from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_date(value: str | date | None) -> date | None:
    """Parse a calendar date. Returns None for unset or malformed input."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) < 10:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def normalize_date(value: str | date | None) -> str | None:
    """Canonical YYYY-MM-DD form, the only form used for comparison and storage."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None


def iter_days(start: str, end: str) -> Iterator[str]:
    """Yield every day from start to end inclusive. Nothing if either is malformed."""
    current = parse_date(start)
    last = parse_date(end)
    if current is None or last is None:
        return
    while current <= last:
        yield current.isoformat()
        current += timedelta(days=1)


def days_between(start: str | None, end: str | None) -> int | None:
    first = parse_date(start)
    last = parse_date(end)
    if first is None or last is None:
        return None
    return (last - first).days


def format_iso(year: int, month_index: int, day: int) -> str:
    return f"{year:04d}-{month_index + 1:02d}-{day:02d}"


def shift_month(year: int, month_index: int, step: int) -> tuple[int, int]:
    """Move a (year, 0-based month) cursor by `step` months, rolling over years."""
    total = year * 12 + month_index + step
    return total // 12, total % 12


def days_in_month(year: int, month_index: int) -> int:
    return calendar.monthrange(year, month_index + 1)[1]


def first_weekday_sunday_based(year: int, month_index: int) -> int:
    """0 = Sunday ... 6 = Saturday for the first of the month."""
    return (date(year, month_index + 1, 1).weekday() + 1) % 7
