from __future__ import annotations

from abc import ABC, abstractmethod

from rental.domain.entities.booking import Booking


class BookingHistoryPort(ABC):
    @abstractmethod
    def append_booking(self, booking: Booking) -> None:
        """Record a confirmed booking. Called exactly once per successful checkout."""
        raise NotImplementedError

    @abstractmethod
    def list_bookings(self, car_id: str | None = None) -> list[Booking]:
        """Bookings newest first, optionally for one car."""
        raise NotImplementedError
