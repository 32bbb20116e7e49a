from __future__ import annotations

from abc import ABC, abstractmethod

from rental.domain.entities.car import Car


class ListingSourcePort(ABC):
    @abstractmethod
    def list_cars(self) -> list[Car]:
        """Return every listed car in catalog order."""
        raise NotImplementedError

    @abstractmethod
    def get_car(self, car_id: str) -> Car:
        """Return one car. Raises ListingNotFoundError if unknown."""
        raise NotImplementedError
