from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Car:
    id: str
    host_id: str
    make: str
    model: str
    year: int
    price_per_day_idr: int
    location: str
    description: str = ""
    image_url: str = ""
    is_sponsored: bool = False
    available: bool = True
    rating: float | None = None
    trips: int | None = None
    features: Tuple[str, ...] = ()

    @property
    def title(self) -> str:
        return f"{self.make} {self.model}"

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "Car":
        """Build a Car from a listing record; accepts camelCase or snake_case keys."""

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in payload and payload[key] is not None:
                    return payload[key]
            return default

        features = pick("features", default=[]) or []
        rating = pick("rating")
        trips = pick("trips")
        return Car(
            id=str(payload["id"]),
            host_id=str(pick("hostId", "host_id", default="")),
            make=str(pick("make", default="")).strip(),
            model=str(pick("model", default="")).strip(),
            year=int(pick("year", default=0)),
            price_per_day_idr=int(pick("pricePerDayIdr", "price_per_day_idr", default=0)),
            location=str(pick("location", default="")).strip(),
            description=str(pick("description", default="")),
            image_url=str(pick("imageUrl", "image_url", default="")),
            is_sponsored=bool(pick("isSponsored", "is_sponsored", default=False)),
            available=bool(pick("available", default=True)),
            rating=float(rating) if rating is not None else None,
            trips=int(trips) if trips is not None else None,
            features=tuple(str(f).strip() for f in features if f and str(f).strip()),
        )
