from __future__ import annotations

from abc import ABC, abstractmethod


class UnavailableDatesPort(ABC):
    @abstractmethod
    def get_unavailable_dates(self, car_id: str) -> frozenset[str]:
        """Blocked YYYY-MM-DD dates for a car. Empty set when nothing is blocked."""
        raise NotImplementedError
