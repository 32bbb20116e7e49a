from __future__ import annotations

import logging

from rental.application.ports.insights import InsightPort, NearbyPlaces, SearchIntent
from rental.domain.entities.car import Car

FALLBACK_HIGHLIGHTS = ["Perfect for city driving", "Fuel efficient", "Host recommended"]
EMPTY_HIGHLIGHTS = ["Great value", "Comfortable ride", "Top rated host"]
FALLBACK_NEARBY_TEXT = "Could not load suggestions."
EMPTY_NEARBY_TEXT = "Explore the city with your car!"
EMPTY_DESCRIPTION = "A great car for your journey."


class CarInsightsUseCase:
    """
    Best-effort listing copy. Every provider failure degrades to static text;
    nothing here may raise into the booking flow.
    """

    def __init__(self, insights: InsightPort) -> None:
        self._insights = insights
        self._logger = logging.getLogger(__name__)

    def highlights(self, car: Car) -> list[str]:
        try:
            highlights = [h.strip() for h in self._insights.get_highlights(car) if h and h.strip()]
        except Exception as e:
            self._fallback("highlights", e, car_id=car.id)
            return list(FALLBACK_HIGHLIGHTS)
        return highlights or list(EMPTY_HIGHLIGHTS)

    def nearby(self, location: str) -> NearbyPlaces:
        try:
            places = self._insights.get_nearby_destinations(location)
        except Exception as e:
            self._fallback("nearby", e)
            return NearbyPlaces(text=FALLBACK_NEARBY_TEXT, links=[])
        if not places.text.strip():
            return NearbyPlaces(text=EMPTY_NEARBY_TEXT, links=list(places.links))
        return places

    def description(self, make: str, model: str, year: int, location: str) -> str:
        try:
            text = self._insights.generate_description(make, model, year, location).strip()
        except Exception as e:
            self._fallback("description", e)
            return f"Experience the comfort of this {year} {make} {model} in {location}. Perfect for your trip!"
        return text or EMPTY_DESCRIPTION

    def parse_search(self, query: str) -> SearchIntent | None:
        if not query.strip():
            return None
        try:
            return self._insights.parse_search_query(query)
        except Exception as e:
            self._fallback("search", e)
            return None

    def _fallback(self, what: str, error: Exception, car_id: str | None = None) -> None:
        self._logger.warning(
            "Insight service failed, using fallback",
            extra={"reason": what, "car_id": car_id, "error": str(error)},
        )
