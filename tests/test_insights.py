from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from rental.application.exceptions import InsightContractError, InsightUpstreamError
from rental.application.ports.insights import InsightPort, NearbyPlaces, SearchIntent
from rental.application.use_cases.car_insights import (
    EMPTY_DESCRIPTION,
    EMPTY_HIGHLIGHTS,
    EMPTY_NEARBY_TEXT,
    FALLBACK_HIGHLIGHTS,
    FALLBACK_NEARBY_TEXT,
    CarInsightsUseCase,
)
from rental.application.use_cases.car_search import CarSearchUseCase
from rental.application.utils.feature_categories import feature_category
from rental.application.utils.reference_codes import new_booking_id, new_reference_code
from rental.infrastructure.listings.catalog_data import INITIAL_CARS
from rental.infrastructure.listings.static_listings import StaticListingSource
from rental.infrastructure.llm.mock_insights import MockInsights
from rental.infrastructure.llm.openai_insights import OpenAIInsights

CAR = INITIAL_CARS[0]


def _client_returning(content: str | None) -> MagicMock:
    client = MagicMock()
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    return client


class FailingInsights(InsightPort):
    def get_highlights(self, car):
        raise InsightUpstreamError("down")

    def get_nearby_destinations(self, location):
        raise InsightUpstreamError("down")

    def generate_description(self, make, model, year, location):
        raise InsightContractError("bad json")

    def parse_search_query(self, query):
        raise InsightUpstreamError("down")


class EmptyInsights(InsightPort):
    def get_highlights(self, car):
        return ["", "  "]

    def get_nearby_destinations(self, location):
        return NearbyPlaces(text="")

    def generate_description(self, make, model, year, location):
        return ""

    def parse_search_query(self, query):
        return SearchIntent(location="", date="")


def test_openai_highlights_are_capped_at_three():
    client = _client_returning(json.dumps({"highlights": ["Roomy", "Cheap", " ", "Reliable", "Fast"]}))
    assert OpenAIInsights(client=client).get_highlights(CAR) == ["Roomy", "Cheap", "Reliable"]
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}


def test_openai_nearby_builds_text_and_links():
    payload = {
        "places": [
            {"name": "Uluwatu", "description": "Cliff temple.", "url": "https://maps.test/uluwatu"},
            {"name": "Ubud"},
        ]
    }
    places = OpenAIInsights(client=_client_returning(json.dumps(payload))).get_nearby_destinations("Bali")
    assert places.text == "Uluwatu: Cliff temple.\nUbud"
    assert places.links == [{"title": "Uluwatu", "uri": "https://maps.test/uluwatu"}]


def test_openai_search_intent():
    client = _client_returning(json.dumps({"location": "Bali", "date": "2025-12-01"}))
    assert OpenAIInsights(client=client).parse_search_query("bali next monday") == SearchIntent(
        location="Bali", date="2025-12-01"
    )


@pytest.mark.parametrize("content", [None, "", "not json", "[1, 2]", json.dumps({"highlights": "Roomy"})])
def test_openai_malformed_output_raises_contract_error(content):
    with pytest.raises(InsightContractError):
        OpenAIInsights(client=_client_returning(content)).get_highlights(CAR)


def test_openai_provider_failure_raises_upstream_error():
    client = MagicMock()
    client.chat.completions.create.side_effect = RuntimeError("timeout")
    with pytest.raises(InsightUpstreamError):
        OpenAIInsights(client=client).generate_description("Toyota", "Avanza", 2022, "Bali")


def test_use_case_falls_back_on_provider_errors():
    uc = CarInsightsUseCase(FailingInsights())
    assert uc.highlights(CAR) == FALLBACK_HIGHLIGHTS
    assert uc.nearby("Bali").text == FALLBACK_NEARBY_TEXT
    assert uc.description("Toyota", "Avanza", 2022, "Bali") == (
        "Experience the comfort of this 2022 Toyota Avanza in Bali. Perfect for your trip!"
    )
    assert uc.parse_search("cars in bali") is None


def test_use_case_replaces_empty_output():
    uc = CarInsightsUseCase(EmptyInsights())
    assert uc.highlights(CAR) == EMPTY_HIGHLIGHTS
    assert uc.nearby("Bali").text == EMPTY_NEARBY_TEXT
    assert uc.description("Toyota", "Avanza", 2022, "Bali") == EMPTY_DESCRIPTION
    assert uc.parse_search("   ") is None


def test_mock_insights_are_deterministic():
    uc = CarInsightsUseCase(MockInsights())
    assert uc.highlights(CAR) == ["7 Seats included", "AC included", "Loved in Bali"]
    assert uc.parse_search("something in kuala lumpur please").location == "Kuala Lumpur"


def test_search_filters_by_location_with_sponsored_first():
    uc = CarSearchUseCase(StaticListingSource())
    bali = uc.execute("bali")
    assert [c.id for c in bali] == ["c1", "c7"]

    everything = uc.execute(None)
    assert len(everything) == len(INITIAL_CARS)
    sponsored_flags = [c.is_sponsored for c in everything]
    assert sponsored_flags == sorted(sponsored_flags, reverse=True)
    assert uc.execute("atlantis") == []


@pytest.mark.parametrize(
    "name, category",
    [
        ("AC", "climate"),
        ("Bluetooth", "connectivity"),
        ("7 Seats", "seating"),
        ("Manual", "transmission"),
        ("Hybrid", "electric"),
        ("Diesel", "fuel"),
        ("Premium Audio", "audio"),
        ("4WD", "general"),
    ],
)
def test_feature_category(name, category):
    assert feature_category(name) == category


def test_reference_codes():
    code = new_reference_code()
    assert code.startswith("TB-")
    assert len(code) == 11
    assert code[3:].isalnum() and code[3:] == code[3:].upper()
    assert new_booking_id() != new_booking_id()
