"""
Tests for the browse -> details -> checkout -> confirmed flow.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from rental.application.exceptions import BookingFlowError
from rental.application.ports.booking_history import BookingHistoryPort
from rental.application.use_cases.booking_lifecycle import BookingLifecycleController
from rental.domain.entities.booking import Booking
from rental.domain.entities.car import Car
from rental.domain.entities.date_range import DateRange
from rental.domain.entities.flow_state import FlowState
from rental.domain.entities.rate_plan import RatePlan
from rental.infrastructure.availability.mock_availability import MockUnavailableDates
from rental.infrastructure.scheduling.manual_scheduler import ManualScheduler
from rental.infrastructure.store.memory_booking_history import MemoryBookingHistory

CAR = Car(
    id="car-1",
    host_id="h1",
    make="Toyota",
    model="Avanza",
    year=2022,
    price_per_day_idr=500_000,
    location="Bali, Indonesia",
)
BLOCKED = {"car-1": frozenset({"2025-11-28", "2025-11-29"})}
BOOKED_AT = datetime(2025, 11, 1, 9, 30, tzinfo=timezone.utc)

VALID_FIELDS = {
    "mobile": "812 3456 7890",
    "email": "ana@example.com",
    "first_name": "Ana",
    "last_name": "Putri",
    "age": "25+",
    "card_number": "4111111111111111",
    "expiry": "12/27",
    "cvc": "123",
}


class FailingHistory(BookingHistoryPort):
    def append_booking(self, booking: Booking) -> None:
        raise IOError("disk full")

    def list_bookings(self, car_id: str | None = None) -> list[Booking]:
        return []


def _controller(history: BookingHistoryPort | None = None):
    scheduler = ManualScheduler()
    history = history or MemoryBookingHistory()
    controller = BookingLifecycleController(
        availability=MockUnavailableDates(BLOCKED),
        history=history,
        scheduler=scheduler,
        currency="IDR",
        payment_delay_seconds=3.0,
        today=lambda: date(2025, 11, 1),
        clock=lambda: BOOKED_AT,
        session_id="test-session",
    )
    return controller, scheduler, history


def _at_checkout(start: str = "2025-11-24", end: str = "2025-11-27"):
    controller, scheduler, history = _controller()
    controller.open_car(CAR)
    controller.click_day(start)
    controller.click_day(end)
    assert controller.proceed_to_checkout() is True
    return controller, scheduler, history


def _fill(controller: BookingLifecycleController) -> None:
    for name, value in VALID_FIELDS.items():
        controller.edit_field(name, value)


def test_open_car_loads_unavailable_dates():
    controller, _, _ = _controller()
    assert controller.state == FlowState.BROWSING
    controller.open_car(CAR)
    assert controller.state == FlowState.DETAILS_OPEN
    assert controller.unavailable_dates == frozenset({"2025-11-28", "2025-11-29"})
    assert controller.calendar.cursor == (2025, 10)


def test_state_tracks_selection_phase():
    controller, _, _ = _controller()
    controller.open_car(CAR)
    controller.click_day("2025-11-24")
    assert controller.state == FlowState.DATES_SELECTING
    assert controller.can_proceed is False
    controller.click_day("2025-11-26")
    assert controller.state == FlowState.DETAILS_OPEN
    assert controller.can_proceed is True


def test_straddling_range_blocks_checkout():
    controller, _, _ = _controller()
    controller.open_car(CAR)
    controller.click_day("2025-11-24")
    controller.click_day("2025-11-30")
    assert controller.date_range == DateRange(start="2025-11-24", end="2025-11-30")
    assert controller.can_proceed is False
    assert controller.proceed_to_checkout() is False
    assert controller.state == FlowState.DETAILS_OPEN


def test_quote_matches_pricing_engine():
    controller, _, _ = _at_checkout()
    quote = controller.quote()
    assert quote.days == 3
    assert quote.daily_rate == 500_000
    assert quote.breakdown.total == 1_581_750
    assert quote.formatted_total == "Rp 1,581,750"

    controller.select_plan(RatePlan.REFUNDABLE)
    controller.select_plan("refundable")
    assert controller.quote().breakdown.total == 1_785_000
    assert controller.date_range == DateRange(start="2025-11-24", end="2025-11-27")


def test_back_preserves_range_and_close_discards_it():
    controller, _, _ = _at_checkout()
    controller.edit_field("email", "ana@example.com")
    controller.back_to_details()
    assert controller.state == FlowState.DETAILS_OPEN
    assert controller.date_range == DateRange(start="2025-11-24", end="2025-11-27")
    assert controller.form.email == ""

    controller.close_details()
    assert controller.state == FlowState.BROWSING
    assert controller.car is None
    assert controller.date_range == DateRange()


def test_invalid_submit_reports_errors_and_edit_clears_one():
    controller, scheduler, _ = _at_checkout()
    result = controller.submit_checkout()
    assert result.valid is False
    assert "email" in controller.field_errors
    assert scheduler.tasks == []

    controller.edit_field("email", "a")
    assert "email" not in controller.field_errors
    assert "mobile" in controller.field_errors


def test_valid_submit_confirms_after_scheduled_payment():
    controller, scheduler, history = _at_checkout()
    _fill(controller)
    result = controller.submit_checkout()

    assert result.valid is True
    assert controller.processing is True
    assert controller.state == FlowState.CHECKOUT_OPEN
    assert scheduler.tasks[0].delay_seconds == 3.0

    with pytest.raises(BookingFlowError):
        controller.edit_field("email", "other@example.com")
    with pytest.raises(BookingFlowError):
        controller.back_to_details()

    assert scheduler.run_pending() == 1
    assert controller.state == FlowState.CONFIRMED
    assert controller.processing is False

    booking = controller.last_booking
    assert booking.car_id == "car-1"
    assert booking.start_date == "2025-11-24"
    assert booking.end_date == "2025-11-27"
    assert booking.total_price == 1_581_750
    assert booking.currency == "IDR"
    assert booking.status == "upcoming"
    assert booking.booked_at == BOOKED_AT
    assert booking.reference_code.startswith("TB-")
    assert len(booking.reference_code) == 11
    assert len(booking.id) == 32
    assert history.list_bookings() == [booking]

    # Selection survives confirmation until the user navigates away.
    assert controller.car == CAR
    trips = controller.navigate_trips()
    assert trips == [booking]
    assert controller.state == FlowState.BROWSING
    assert controller.car is None


def test_history_lists_newest_first():
    controller, scheduler, history = _at_checkout()
    _fill(controller)
    controller.submit_checkout()
    scheduler.run_pending()
    first = controller.last_booking

    controller.navigate_home()
    controller.open_car(CAR)
    controller.click_day("2025-12-01")
    controller.click_day("2025-12-03")
    controller.proceed_to_checkout()
    _fill(controller)
    controller.submit_checkout()
    scheduler.run_pending()

    assert history.list_bookings() == [controller.last_booking, first]


def test_history_failure_does_not_abort_booking():
    controller, scheduler, _ = _controller(history=FailingHistory())
    controller.open_car(CAR)
    controller.click_day("2025-11-24")
    controller.click_day("2025-11-25")
    controller.proceed_to_checkout()
    _fill(controller)
    controller.submit_checkout()
    scheduler.run_pending()
    assert controller.state == FlowState.CONFIRMED
    assert controller.last_booking is not None


def test_teardown_cancels_pending_payment():
    controller, scheduler, history = _at_checkout()
    _fill(controller)
    controller.submit_checkout()
    task = scheduler.tasks[0]

    controller.teardown()
    assert task.pending is False
    assert scheduler.run_pending() == 0
    assert controller.state == FlowState.CHECKOUT_OPEN
    assert history.list_bookings() == []


def test_actions_outside_their_state_raise():
    controller, _, _ = _controller()
    with pytest.raises(BookingFlowError):
        controller.click_day("2025-11-24")
    with pytest.raises(BookingFlowError):
        controller.submit_checkout()

    controller.open_car(CAR)
    with pytest.raises(BookingFlowError):
        controller.open_car(CAR)
    with pytest.raises(BookingFlowError):
        controller.select_plan(RatePlan.REFUNDABLE)
    with pytest.raises(BookingFlowError):
        controller.back_to_details()


def test_unknown_checkout_field_is_rejected():
    controller, _, _ = _at_checkout()
    with pytest.raises(BookingFlowError):
        controller.edit_field("password", "x")
