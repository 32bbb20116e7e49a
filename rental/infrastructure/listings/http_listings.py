from __future__ import annotations

import logging

import httpx

from rental.application.exceptions import ListingNotFoundError
from rental.application.ports.listing_source import ListingSourcePort
from rental.domain.entities.car import Car


class HttpListingSource(ListingSourcePort):
    """Fetches the car collection once from a JSON endpoint and serves it from memory."""

    def __init__(self, url: str, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._url = url
        self._client = client or httpx.Client(timeout=timeout)
        self._cars: list[Car] | None = None
        self._logger = logging.getLogger(__name__)

    def list_cars(self) -> list[Car]:
        if self._cars is None:
            self._cars = self._fetch()
        return list(self._cars)

    def get_car(self, car_id: str) -> Car:
        for car in self.list_cars():
            if car.id == car_id:
                return car
        raise ListingNotFoundError(f"Car not found: {car_id}")

    def refresh(self) -> None:
        self._cars = None

    def _fetch(self) -> list[Car]:
        resp = self._client.get(self._url)
        resp.raise_for_status()
        data = resp.json()
        records = data.get("cars", []) if isinstance(data, dict) else data

        cars: list[Car] = []
        for record in records:
            try:
                cars.append(Car.from_payload(record))
            except (KeyError, TypeError, ValueError) as e:
                self._logger.warning("Skipping malformed listing", extra={"error": str(e)})
        self._logger.info("Listings fetched", extra={"count": len(cars)})
        return cars
