from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from quote_engine.domain.entities.geo import GeoPoint

MAX_RATING = 5.0


@dataclass(frozen=True)
class ChefSummary:
    id: str
    name: str | None = None
    rating_average: float | None = None
    location_coords: GeoPoint | None = None
    # Extra serviceable locations; the closest valid one is used for ranking.
    service_locations: tuple[GeoPoint, ...] = ()
    price_per_hour: Decimal | None = None
    distance_meters: int | None = None  # populated only by ranking

    @property
    def candidate_locations(self) -> tuple[GeoPoint, ...]:
        if self.location_coords is None:
            return self.service_locations
        return (self.location_coords,) + self.service_locations

    def with_distance(self, distance_meters: int | None) -> "ChefSummary":
        return replace(self, distance_meters=distance_meters)

    @staticmethod
    def from_payload(raw: Mapping[str, Any]) -> "ChefSummary":
        """Build from a directory record, accepting both snake_case and the backend's camelCase keys."""
        rating = raw.get("rating_average", raw.get("averageRating", raw.get("rating")))
        try:
            rating_value = float(rating) if rating is not None else None
        except (TypeError, ValueError):
            rating_value = None
        if rating_value is not None and not (math.isfinite(rating_value) and 0 <= rating_value <= MAX_RATING):
            rating_value = None

        # older records only carry ``rate``
        price = raw.get("price_per_hour", raw.get("pricePerHour")) or raw.get("rate")
        try:
            price_value = Decimal(str(price)) if price not in (None, "") else None
        except InvalidOperation:
            price_value = None

        extra_locations = raw.get("service_locations", raw.get("serviceableCoords")) or []
        service_locations = tuple(
            point for point in (GeoPoint.from_payload(item) for item in extra_locations) if point is not None
        )

        return ChefSummary(
            id=str(raw.get("id") or raw.get("_id") or ""),
            name=raw.get("name") or raw.get("fullName"),
            rating_average=rating_value,
            location_coords=GeoPoint.from_payload(raw.get("location_coords", raw.get("locationCoords"))),
            service_locations=service_locations,
            price_per_hour=price_value,
        )
