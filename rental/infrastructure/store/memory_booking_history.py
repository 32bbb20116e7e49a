from __future__ import annotations

import threading

from rental.application.ports.booking_history import BookingHistoryPort
from rental.domain.entities.booking import Booking


class MemoryBookingHistory(BookingHistoryPort):
    def __init__(self) -> None:
        self._bookings: list[Booking] = []  # newest first
        self._lock = threading.Lock()

    def append_booking(self, booking: Booking) -> None:
        with self._lock:
            self._bookings.insert(0, booking)

    def list_bookings(self, car_id: str | None = None) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings if car_id is None or b.car_id == car_id]
