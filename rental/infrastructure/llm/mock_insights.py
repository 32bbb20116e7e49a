from __future__ import annotations

from rental.application.ports.insights import InsightPort, NearbyPlaces, SearchIntent
from rental.domain.entities.car import Car

KNOWN_CITIES = (
    "Bali",
    "Jakarta",
    "Kuala Lumpur",
    "Singapore",
    "Toronto",
    "Vancouver",
    "New York",
    "Los Angeles",
)


class MockInsights(InsightPort):
    def get_highlights(self, car: Car) -> list[str]:
        base = [f"{feature} included" for feature in car.features[:2]]
        base.append(f"Loved in {car.location.split(',')[0]}")
        return base[:3]

    def get_nearby_destinations(self, location: str) -> NearbyPlaces:
        city = location.split(",")[0].strip() or "the city"
        return NearbyPlaces(text=f"Take a scenic drive around {city} and explore its coastline and hills.", links=[])

    def generate_description(self, make: str, model: str, year: int, location: str) -> str:
        return f"This {year} {make} {model} is ready for your next trip around {location}."

    def parse_search_query(self, query: str) -> SearchIntent:
        normalized = query.lower()
        for city in KNOWN_CITIES:
            if city.lower() in normalized:
                return SearchIntent(location=city, date="")
        return SearchIntent(location=query.strip(), date="")
