from __future__ import annotations

import json
from typing import Any

from openai import OpenAI

from rental.application.exceptions import InsightContractError, InsightUpstreamError
from rental.application.ports.insights import InsightPort, NearbyPlaces, SearchIntent
from rental.core.config import settings
from rental.domain.entities.car import Car
from rental.infrastructure.llm.prompts import (
    build_description_prompt,
    build_highlights_prompt,
    build_nearby_prompt,
    build_search_prompt,
)


class OpenAIInsights(InsightPort):
    """
    OpenAI-backed adapter implementing InsightPort.

    Raises:
        InsightUpstreamError: networking/provider failures
        InsightContractError: invalid JSON or wrong schema/shape
    """

    def __init__(self, client: OpenAI | None = None) -> None:
        self.client = client or OpenAI(api_key=settings.OPENAI_API_KEY)

    def get_highlights(self, car: Car) -> list[str]:
        data = self._call_json(build_highlights_prompt(car), what="highlights")
        raw = data.get("highlights")
        if not isinstance(raw, list):
            raise InsightContractError("Highlights: 'highlights' must be a list of strings.")
        out: list[str] = []
        for item in raw:
            if not isinstance(item, str):
                raise InsightContractError("Highlights: all items must be strings.")
            if item.strip():
                out.append(item.strip())
        return out[:3]

    def get_nearby_destinations(self, location: str) -> NearbyPlaces:
        data = self._call_json(build_nearby_prompt(location), what="nearby")
        places = data.get("places")
        if not isinstance(places, list):
            raise InsightContractError("Nearby: 'places' must be a list.")

        lines: list[str] = []
        links: list[dict[str, str]] = []
        for place in places:
            if not isinstance(place, dict) or not isinstance(place.get("name"), str):
                raise InsightContractError("Nearby: each place needs a string 'name'.")
            name = place["name"].strip()
            description = str(place.get("description") or "").strip()
            lines.append(f"{name}: {description}" if description else name)
            url = str(place.get("url") or "").strip()
            if url:
                links.append({"title": name, "uri": url})
        return NearbyPlaces(text="\n".join(lines), links=links)

    def generate_description(self, make: str, model: str, year: int, location: str) -> str:
        data = self._call_json(build_description_prompt(make, model, year, location), what="description")
        description = data.get("description")
        if not isinstance(description, str):
            raise InsightContractError("Description: 'description' must be a string.")
        return description.strip()

    def parse_search_query(self, query: str) -> SearchIntent:
        data = self._call_json(build_search_prompt(query), what="search")
        location = data.get("location")
        if not isinstance(location, str):
            raise InsightContractError("Search: 'location' must be a string.")
        return SearchIntent(location=location.strip(), date=str(data.get("date") or "").strip())

    def _call_json(self, prompt: str, what: str) -> dict[str, Any]:
        try:
            resp = self.client.chat.completions.create(
                model=settings.OPENAI_MODEL_INSIGHTS,
                messages=[
                    {"role": "system", "content": "Return only valid JSON. Do not include markdown or extra text."},
                    {"role": "user", "content": prompt},
                ],
                temperature=settings.OPENAI_TEMPERATURE_INSIGHTS,
                max_tokens=600,
                response_format={"type": "json_object"},
            )
        except Exception as e:
            raise InsightUpstreamError(f"OpenAI API error: {e}") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise InsightContractError("LLM returned empty response text.")

        data = _parse_json(content, what=what)
        if not isinstance(data, dict):
            raise InsightContractError(f"{what.capitalize()}: expected a JSON object.")
        return data


def _parse_json(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except Exception:
        snippet = text[:200].replace("\n", " ")
        raise InsightContractError(f"{what.capitalize()}: invalid JSON. Snippet: {snippet!r}")
