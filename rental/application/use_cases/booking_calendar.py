from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from datetime import date

from rental.application.utils.calendar_dates import (
    MONTH_NAMES,
    days_in_month,
    first_weekday_sunday_based,
    format_iso,
    normalize_date,
    parse_date,
    shift_month,
)
from rental.domain.entities.calendar_day import CalendarDay, DayStatus, MonthGrid
from rental.domain.entities.date_range import DateRange


def classify_day(day: str, date_range: DateRange, unavailable: Collection[str]) -> DayStatus:
    """Status of one calendar cell. Earlier rules take precedence."""
    if day in unavailable:
        return DayStatus.UNAVAILABLE
    if day == date_range.start:
        return DayStatus.START
    if day == date_range.end:
        return DayStatus.END
    if date_range.start and date_range.end and date_range.start < day < date_range.end:
        return DayStatus.IN_RANGE
    return DayStatus.AVAILABLE


def range_connector(status: DayStatus, date_range: DateRange) -> str | None:
    if status == DayStatus.START and date_range.end:
        return "right-half"
    if status == DayStatus.END and date_range.start:
        return "left-half"
    if status == DayStatus.IN_RANGE:
        return "full"
    return None


class BookingCalendar:
    """
    Month-grid date-range picker.

    Clicks follow a two-phase protocol: a click starts a new range unless a
    start is pending, in which case it completes the range (or restarts it
    when the click is before the start). Blocked days ignore clicks. The
    resulting range is not checked for blocked days in between; callers gate
    on is_range_available.
    """

    def __init__(
        self,
        unavailable_dates: Iterable[str],
        date_range: DateRange | None = None,
        on_range_change: Callable[[DateRange], None] | None = None,
        today: date | None = None,
    ) -> None:
        self._unavailable = frozenset(
            d for d in (normalize_date(v) for v in unavailable_dates) if d
        )
        current = date_range or DateRange()
        start, end = normalize_date(current.start), normalize_date(current.end)
        if start and end and end < start:
            start, end = end, start
        self._range = DateRange(start=start, end=end)
        self._on_range_change = on_range_change

        anchor = parse_date(self._range.start) or today or date.today()
        self._year = anchor.year
        self._month_index = anchor.month - 1

    @property
    def unavailable_dates(self) -> frozenset[str]:
        return self._unavailable

    @property
    def date_range(self) -> DateRange:
        return self._range

    @property
    def cursor(self) -> tuple[int, int]:
        """(year, 0-based month index) of the rendered month."""
        return self._year, self._month_index

    def previous_month(self) -> tuple[int, int]:
        return self.navigate(-1)

    def next_month(self) -> tuple[int, int]:
        return self.navigate(1)

    def navigate(self, step: int) -> tuple[int, int]:
        self._year, self._month_index = shift_month(self._year, self._month_index, step)
        return self.cursor

    def click(self, day: str | date) -> DateRange:
        clicked = normalize_date(day)
        if clicked is None or clicked in self._unavailable:
            return self._range

        current = self._range
        if not current.start or current.is_complete:
            updated = DateRange(start=clicked)
        elif clicked < current.start:
            updated = DateRange(start=clicked)
        else:
            updated = DateRange(start=current.start, end=clicked)

        self._range = updated
        if self._on_range_change is not None:
            self._on_range_change(updated)
        return updated

    def click_day(self, day_of_month: int) -> DateRange:
        """Click a day number in the rendered month."""
        if not 1 <= day_of_month <= days_in_month(self._year, self._month_index):
            return self._range
        return self.click(format_iso(self._year, self._month_index, day_of_month))

    def classify(self, day: str | date) -> DayStatus:
        normalized = normalize_date(day)
        if normalized is None:
            return DayStatus.AVAILABLE
        return classify_day(normalized, self._range, self._unavailable)

    def month_grid(self) -> MonthGrid:
        year, month_index = self._year, self._month_index
        cells: list[CalendarDay | None] = [None] * first_weekday_sunday_based(year, month_index)
        for day_of_month in range(1, days_in_month(year, month_index) + 1):
            iso = format_iso(year, month_index, day_of_month)
            status = classify_day(iso, self._range, self._unavailable)
            cells.append(
                CalendarDay(
                    date=iso,
                    day=day_of_month,
                    status=status,
                    connector=range_connector(status, self._range),
                )
            )
        while len(cells) % 7:
            cells.append(None)

        weeks = tuple(tuple(cells[i : i + 7]) for i in range(0, len(cells), 7))
        return MonthGrid(
            year=year,
            month_index=month_index,
            month_name=MONTH_NAMES[month_index],
            weeks=weeks,
        )
