from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from rental.domain.entities.car import Car


@dataclass(frozen=True)
class NearbyPlaces:
    text: str
    links: list[dict[str, str]] = field(default_factory=list)  # {"title", "uri"}


@dataclass(frozen=True)
class SearchIntent:
    location: str
    date: str  # empty when the query names no date


class InsightPort(ABC):
    """
    Generative-text provider for supplementary listing copy.

    Adapters raise InsightUpstreamError on provider failures and
    InsightContractError on malformed output. Callers never depend on
    the result to book a car.
    """

    @abstractmethod
    def get_highlights(self, car: Car) -> list[str]:
        """Three short selling points for a car."""
        raise NotImplementedError

    @abstractmethod
    def get_nearby_destinations(self, location: str) -> NearbyPlaces:
        """Driving destinations near a location, with links when the provider has them."""
        raise NotImplementedError

    @abstractmethod
    def generate_description(self, make: str, model: str, year: int, location: str) -> str:
        """Two-sentence listing description."""
        raise NotImplementedError

    @abstractmethod
    def parse_search_query(self, query: str) -> SearchIntent:
        """Extract location and date intent from a free-text search."""
        raise NotImplementedError
