"""
Tests for the date-range picker: click protocol, day classification, month navigation.
"""

from __future__ import annotations

from datetime import date

from rental.application.use_cases.booking_calendar import BookingCalendar, classify_day
from rental.application.utils.availability import is_range_available
from rental.domain.entities.calendar_day import DayStatus
from rental.domain.entities.date_range import DateRange

BLOCKED = {"2025-11-28", "2025-11-29"}


def _calendar(date_range: DateRange | None = None, blocked=BLOCKED) -> BookingCalendar:
    return BookingCalendar(unavailable_dates=blocked, date_range=date_range, today=date(2025, 11, 1))


def test_first_click_starts_range():
    calendar = _calendar()
    result = calendar.click("2025-11-24")
    assert result == DateRange(start="2025-11-24", end=None)
    assert result.awaiting_end


def test_second_click_completes_range():
    calendar = _calendar()
    calendar.click("2025-11-24")
    result = calendar.click("2025-11-26")
    assert result == DateRange(start="2025-11-24", end="2025-11-26")


def test_same_day_click_completes_single_day_range():
    calendar = _calendar()
    calendar.click("2025-11-24")
    assert calendar.click("2025-11-24") == DateRange(start="2025-11-24", end="2025-11-24")


def test_click_before_start_restarts_selection():
    calendar = _calendar()
    calendar.click("2025-11-24")
    result = calendar.click("2025-11-20")
    assert result == DateRange(start="2025-11-20", end=None)


def test_click_after_complete_range_always_restarts():
    """Clicking any free day after a completed range starts a new one, wherever it falls."""
    for day in ("2025-11-01", "2025-11-22", "2025-11-25", "2025-11-30", "2025-12-15"):
        calendar = _calendar(DateRange(start="2025-11-22", end="2025-11-26"))
        assert calendar.click(day) == DateRange(start=day, end=None)


def test_click_on_blocked_day_is_noop_in_every_phase():
    for initial in (
        DateRange(),
        DateRange(start="2025-11-24"),
        DateRange(start="2025-11-20", end="2025-11-22"),
    ):
        changes = []
        calendar = BookingCalendar(BLOCKED, date_range=initial, on_range_change=changes.append)
        assert calendar.click("2025-11-28") == initial
        assert calendar.date_range == initial
        assert changes == []


def test_callback_receives_each_new_range():
    changes = []
    calendar = BookingCalendar(BLOCKED, on_range_change=changes.append, today=date(2025, 11, 1))
    calendar.click("2025-11-24")
    calendar.click("2025-11-26")
    assert changes == [
        DateRange(start="2025-11-24"),
        DateRange(start="2025-11-24", end="2025-11-26"),
    ]


def test_range_is_never_inverted():
    calendar = _calendar(blocked=set())
    clicks = ["2025-11-10", "2025-11-05", "2025-11-07", "2025-11-01", "2025-11-03", "2025-11-02", "2025-11-01"]
    for day in clicks:
        result = calendar.click(day)
        if result.is_complete:
            assert result.start <= result.end


def test_straddling_range_is_selectable_but_not_available():
    """Neither endpoint is blocked, but the days in between are."""
    calendar = _calendar()
    calendar.click("2025-11-24")
    result = calendar.click("2025-11-30")
    assert result == DateRange(start="2025-11-24", end="2025-11-30")
    assert is_range_available(result, calendar.unavailable_dates) is False


def test_malformed_click_is_ignored():
    calendar = _calendar()
    assert calendar.click("not-a-date") == DateRange()


def test_classification_precedence():
    date_range = DateRange(start="2025-11-20", end="2025-11-24")
    blocked = {"2025-11-20"}
    assert classify_day("2025-11-20", date_range, blocked) == DayStatus.UNAVAILABLE
    assert classify_day("2025-11-24", date_range, blocked) == DayStatus.END
    assert classify_day("2025-11-22", date_range, blocked) == DayStatus.IN_RANGE
    assert classify_day("2025-11-25", date_range, blocked) == DayStatus.AVAILABLE
    assert classify_day("2025-11-20", date_range, set()) == DayStatus.START


def test_no_in_range_days_without_end():
    date_range = DateRange(start="2025-11-20")
    assert classify_day("2025-11-21", date_range, set()) == DayStatus.AVAILABLE


def test_previous_month_wraps_year():
    calendar = BookingCalendar(set(), today=date(2025, 1, 15))
    assert calendar.cursor == (2025, 0)
    assert calendar.previous_month() == (2024, 11)


def test_next_month_wraps_year():
    calendar = BookingCalendar(set(), today=date(2024, 12, 3))
    assert calendar.next_month() == (2025, 0)


def test_initial_cursor_follows_range_start():
    calendar = BookingCalendar(set(), date_range=DateRange(start="2026-03-10"), today=date(2025, 1, 1))
    assert calendar.cursor == (2026, 2)


def test_month_grid_layout_and_connectors():
    calendar = _calendar(DateRange(start="2025-11-24", end="2025-11-26"))
    grid = calendar.month_grid()

    assert grid.month_name == "November"
    # 1 November 2025 is a Saturday: six leading pads.
    assert grid.weeks[0][:6] == (None,) * 6
    assert grid.weeks[0][6].date == "2025-11-01"
    assert all(len(week) == 7 for week in grid.weeks)

    cells = {cell.date: cell for week in grid.weeks for cell in week if cell}
    assert len(cells) == 30
    assert cells["2025-11-24"].connector == "right-half"
    assert cells["2025-11-25"].status == DayStatus.IN_RANGE
    assert cells["2025-11-25"].connector == "full"
    assert cells["2025-11-26"].connector == "left-half"
    assert cells["2025-11-28"].status == DayStatus.UNAVAILABLE
    assert cells["2025-11-27"].connector is None


def test_click_day_uses_rendered_month():
    calendar = _calendar()
    calendar.navigate(1)
    assert calendar.click_day(5) == DateRange(start="2025-12-05")
    assert calendar.click_day(32) == DateRange(start="2025-12-05")


def test_inverted_initial_range_is_reordered():
    calendar = BookingCalendar(set(), date_range=DateRange(start="2025-11-26", end="2025-11-24"))
    assert calendar.date_range == DateRange(start="2025-11-24", end="2025-11-26")
    assert calendar.classify("2025-11-25") == DayStatus.IN_RANGE
    assert calendar.cursor == (2025, 10)
