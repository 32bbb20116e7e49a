from __future__ import annotations

from collections.abc import Iterable

from rental.application.exceptions import ListingNotFoundError
from rental.application.ports.listing_source import ListingSourcePort
from rental.domain.entities.car import Car
from rental.infrastructure.listings.catalog_data import INITIAL_CARS


class StaticListingSource(ListingSourcePort):
    def __init__(self, cars: Iterable[Car] | None = None) -> None:
        self._cars = list(cars if cars is not None else INITIAL_CARS)

    def list_cars(self) -> list[Car]:
        return list(self._cars)

    def get_car(self, car_id: str) -> Car:
        for car in self._cars:
            if car.id == car_id:
                return car
        raise ListingNotFoundError(f"Car not found: {car_id}")
