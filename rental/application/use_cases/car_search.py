from __future__ import annotations

from rental.application.ports.listing_source import ListingSourcePort
from rental.domain.entities.car import Car


class CarSearchUseCase:
    def __init__(self, listings: ListingSourcePort) -> None:
        self._listings = listings

    def execute(self, location: str | None = None) -> list[Car]:
        """Cars whose location contains the query (case-insensitive), sponsored first."""
        query = (location or "").strip().lower()
        cars = self._listings.list_cars()
        if query:
            cars = [car for car in cars if query in car.location.lower()]
        sponsored = [car for car in cars if car.is_sponsored]
        others = [car for car in cars if not car.is_sponsored]
        return sponsored + others
