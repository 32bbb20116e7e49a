from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone

from rental.application.exceptions import BookingFlowError
from rental.application.ports.availability import UnavailableDatesPort
from rental.application.ports.booking_history import BookingHistoryPort
from rental.application.ports.scheduler import ScheduledTask, SchedulerPort
from rental.application.use_cases.booking_calendar import BookingCalendar
from rental.application.use_cases.checkout_pricing import compute_totals, count_rental_days
from rental.application.use_cases.checkout_validation import (
    ValidationResult,
    clear_field_error,
    validate_checkout_form,
)
from rental.application.utils.availability import is_range_available
from rental.application.utils.price_converter import convert, format_price
from rental.application.utils.reference_codes import new_booking_id, new_reference_code
from rental.domain.entities.booking import Booking
from rental.domain.entities.calendar_day import MonthGrid
from rental.domain.entities.car import Car
from rental.domain.entities.checkout_form import FORM_FIELDS, CheckoutForm, PaymentMethod
from rental.domain.entities.date_range import DateRange
from rental.domain.entities.flow_state import FlowState
from rental.domain.entities.rate_plan import PriceBreakdown, RatePlan

_DETAILS_STATES = (FlowState.DETAILS_OPEN, FlowState.DATES_SELECTING)


@dataclass(frozen=True)
class CheckoutQuote:
    currency: str
    daily_rate: int
    days: int
    plan: RatePlan
    breakdown: PriceBreakdown

    @property
    def formatted_total(self) -> str:
        return format_price(self.breakdown.total, self.currency)


class BookingLifecycleController:
    """
    Drives one renter through browse -> details -> dates -> checkout -> confirmed.

    The payment step is a scheduled completion owned by the controller;
    teardown() cancels it so a discarded session never confirms a booking.
    Calls that are not offered in the current state raise BookingFlowError.
    """

    def __init__(
        self,
        availability: UnavailableDatesPort,
        history: BookingHistoryPort,
        scheduler: SchedulerPort,
        currency: str = "USD",
        payment_delay_seconds: float = 3.0,
        today: Callable[[], date] | None = None,
        clock: Callable[[], datetime] | None = None,
        session_id: str | None = None,
    ) -> None:
        self._availability = availability
        self._history = history
        self._scheduler = scheduler
        self._currency = currency
        self._payment_delay_seconds = payment_delay_seconds
        self._today = today or date.today
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._session_id = session_id
        self._logger = logging.getLogger(__name__)
        self._lock = threading.RLock()

        self._state = FlowState.BROWSING
        self._car: Car | None = None
        self._calendar: BookingCalendar | None = None
        self._plan = RatePlan.NON_REFUNDABLE
        self._payment_method = PaymentMethod.CARD
        self._form = CheckoutForm()
        self._field_errors: dict[str, str] = {}
        self._pending_payment: ScheduledTask | None = None
        self._pending_total: int | None = None
        self._last_booking: Booking | None = None
        self._torn_down = False

    # -- read side ---------------------------------------------------------

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def car(self) -> Car | None:
        return self._car

    @property
    def calendar(self) -> BookingCalendar | None:
        return self._calendar

    @property
    def date_range(self) -> DateRange:
        return self._calendar.date_range if self._calendar else DateRange()

    @property
    def unavailable_dates(self) -> frozenset[str]:
        return self._calendar.unavailable_dates if self._calendar else frozenset()

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def rate_plan(self) -> RatePlan:
        return self._plan

    @property
    def payment_method(self) -> PaymentMethod:
        return self._payment_method

    @property
    def form(self) -> CheckoutForm:
        return replace(self._form)

    @property
    def field_errors(self) -> dict[str, str]:
        return dict(self._field_errors)

    @property
    def processing(self) -> bool:
        return self._pending_payment is not None

    @property
    def last_booking(self) -> Booking | None:
        return self._last_booking

    @property
    def can_proceed(self) -> bool:
        if self._state not in _DETAILS_STATES:
            return False
        date_range = self.date_range
        return date_range.is_complete and is_range_available(date_range, self.unavailable_dates)

    def quote(self) -> CheckoutQuote | None:
        """Price for the selected car and complete range, or None before both exist."""
        date_range = self.date_range
        if self._car is None or not date_range.is_complete:
            return None
        daily_rate = convert(self._car.price_per_day_idr, self._currency)
        days = count_rental_days(date_range.start, date_range.end)
        return CheckoutQuote(
            currency=self._currency,
            daily_rate=daily_rate,
            days=days,
            plan=self._plan,
            breakdown=compute_totals(daily_rate, days, self._plan),
        )

    def month_grid(self) -> MonthGrid:
        return self._require_calendar().month_grid()

    # -- browsing / details ------------------------------------------------

    def set_currency(self, currency: str) -> None:
        with self._lock:
            self._require_idle()
            self._currency = currency.upper()

    def open_car(self, car: Car) -> None:
        with self._lock:
            self._require_state(FlowState.BROWSING)
            unavailable = self._availability.get_unavailable_dates(car.id)
            self._car = car
            self._calendar = BookingCalendar(
                unavailable_dates=unavailable,
                on_range_change=self._on_range_change,
                today=self._today(),
            )
            self._state = FlowState.DETAILS_OPEN
            self._logger.info(
                "Car details opened",
                extra={"session_id": self._session_id, "car_id": car.id, "state": self._state.value},
            )

    def close_details(self) -> None:
        with self._lock:
            self._require_state(*_DETAILS_STATES)
            self._clear_selection()

    def click_day(self, day: str | date) -> DateRange:
        with self._lock:
            self._require_state(*_DETAILS_STATES)
            return self._require_calendar().click(day)

    def navigate_month(self, step: int) -> tuple[int, int]:
        with self._lock:
            self._require_state(*_DETAILS_STATES)
            return self._require_calendar().navigate(step)

    def _on_range_change(self, date_range: DateRange) -> None:
        self._state = FlowState.DATES_SELECTING if date_range.awaiting_end else FlowState.DETAILS_OPEN

    # -- checkout ----------------------------------------------------------

    def proceed_to_checkout(self) -> bool:
        """Open checkout if the range is complete and free. Returns False when gated."""
        with self._lock:
            self._require_state(*_DETAILS_STATES)
            if not self.can_proceed:
                self._logger.info(
                    "Checkout blocked",
                    extra={
                        "session_id": self._session_id,
                        "car_id": self._car.id if self._car else None,
                        "reason": "incomplete range" if not self.date_range.is_complete else "unavailable dates",
                    },
                )
                return False
            self._form = CheckoutForm()
            self._field_errors = {}
            self._plan = RatePlan.NON_REFUNDABLE
            self._payment_method = PaymentMethod.CARD
            self._state = FlowState.CHECKOUT_OPEN
            self._logger.info(
                "Checkout opened",
                extra={"session_id": self._session_id, "car_id": self._car.id, "state": self._state.value},
            )
            return True

    def back_to_details(self) -> None:
        with self._lock:
            self._require_state(FlowState.CHECKOUT_OPEN)
            self._require_idle()
            self._form = CheckoutForm()
            self._field_errors = {}
            self._state = FlowState.DETAILS_OPEN

    def select_plan(self, plan: RatePlan | str) -> None:
        with self._lock:
            self._require_state(FlowState.CHECKOUT_OPEN)
            self._require_idle()
            self._plan = RatePlan(plan)

    def set_payment_method(self, method: PaymentMethod | str) -> None:
        with self._lock:
            self._require_state(FlowState.CHECKOUT_OPEN)
            self._require_idle()
            self._payment_method = PaymentMethod(method)

    def edit_field(self, field_name: str, value: str) -> None:
        with self._lock:
            self._require_state(FlowState.CHECKOUT_OPEN)
            self._require_idle()
            if field_name not in FORM_FIELDS:
                raise BookingFlowError(f"Unknown checkout field: {field_name}")
            setattr(self._form, field_name, value)
            self._field_errors = clear_field_error(self._field_errors, field_name)

    def submit_checkout(self) -> ValidationResult:
        """Validate the form; on success schedule the simulated payment."""
        with self._lock:
            self._require_state(FlowState.CHECKOUT_OPEN)
            self._require_idle()
            result = validate_checkout_form(self._form, self._payment_method)
            self._field_errors = dict(result.field_errors)
            if not result.valid:
                return result

            quote = self.quote()
            self._pending_total = quote.breakdown.total if quote else 0
            self._pending_payment = self._scheduler.schedule(self._payment_delay_seconds, self._complete_payment)
            self._logger.info(
                "Payment scheduled",
                extra={"session_id": self._session_id, "car_id": self._car.id if self._car else None},
            )
            return result

    def _complete_payment(self) -> None:
        with self._lock:
            if self._torn_down or self._pending_payment is None or self._state != FlowState.CHECKOUT_OPEN:
                return
            date_range = self.date_range
            booking = Booking(
                id=new_booking_id(),
                reference_code=new_reference_code(),
                car_id=self._car.id,
                start_date=date_range.start,
                end_date=date_range.end,
                total_price=self._pending_total or 0,
                currency=self._currency,
                status="upcoming",
                booked_at=self._clock(),
            )
            try:
                self._history.append_booking(booking)
            except Exception as e:
                self._logger.exception(
                    "Booking history append failed",
                    extra={"session_id": self._session_id, "booking_id": booking.id, "error": str(e)},
                )

            self._pending_payment = None
            self._pending_total = None
            self._last_booking = booking
            self._state = FlowState.CONFIRMED
            self._logger.info(
                "Booking confirmed",
                extra={
                    "session_id": self._session_id,
                    "booking_id": booking.id,
                    "reference_code": booking.reference_code,
                    "state": self._state.value,
                },
            )

    # -- leaving -----------------------------------------------------------

    def navigate_home(self) -> None:
        with self._lock:
            self._require_idle()
            self._clear_selection()

    def navigate_trips(self) -> list[Booking]:
        with self._lock:
            self._require_idle()
            self._clear_selection()
        return self._history.list_bookings()

    def teardown(self) -> None:
        with self._lock:
            if self._pending_payment is not None:
                self._pending_payment.cancel()
                self._pending_payment = None
                self._pending_total = None
            self._torn_down = True
            self._logger.info("Session torn down", extra={"session_id": self._session_id})

    # -- helpers -----------------------------------------------------------

    def _clear_selection(self) -> None:
        self._car = None
        self._calendar = None
        self._form = CheckoutForm()
        self._field_errors = {}
        self._plan = RatePlan.NON_REFUNDABLE
        self._payment_method = PaymentMethod.CARD
        self._state = FlowState.BROWSING

    def _require_state(self, *allowed: FlowState) -> None:
        if self._torn_down:
            raise BookingFlowError("Session has been torn down.")
        if self._state not in allowed:
            expected = ", ".join(s.value for s in allowed)
            raise BookingFlowError(f"Not allowed in state {self._state.value}; expected {expected}.")

    def _require_idle(self) -> None:
        if self._torn_down:
            raise BookingFlowError("Session has been torn down.")
        if self._pending_payment is not None:
            raise BookingFlowError("Payment is processing.")

    def _require_calendar(self) -> BookingCalendar:
        if self._calendar is None:
            raise BookingFlowError("No car is open.")
        return self._calendar
