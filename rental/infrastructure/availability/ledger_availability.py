from __future__ import annotations

import logging

from rental.application.ports.availability import UnavailableDatesPort
from rental.application.ports.booking_history import BookingHistoryPort
from rental.application.utils.calendar_dates import iter_days


class LedgerUnavailableDates(UnavailableDatesPort):
    """Static blocked days plus every day already taken by an upcoming booking."""

    def __init__(self, base: UnavailableDatesPort, history: BookingHistoryPort) -> None:
        self._base = base
        self._history = history
        self._logger = logging.getLogger(__name__)

    def get_unavailable_dates(self, car_id: str) -> frozenset[str]:
        blocked = set(self._base.get_unavailable_dates(car_id))
        try:
            bookings = self._history.list_bookings(car_id=car_id)
        except Exception as e:
            self._logger.warning(
                "Booking history unavailable, using static blocked dates",
                extra={"car_id": car_id, "error": str(e)},
            )
            return frozenset(blocked)

        for booking in bookings:
            if booking.status != "upcoming":
                continue
            blocked.update(iter_days(booking.start_date, booking.end_date))
        return frozenset(blocked)
