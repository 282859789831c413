from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from quote_engine.application.utils.geo_distance import haversine
from quote_engine.domain.entities.chef import ChefSummary
from quote_engine.domain.entities.geo import GeoPoint

logger = logging.getLogger(__name__)


def closest_distance(origin: GeoPoint, chef: ChefSummary) -> int | None:
    """Distance to the chef's closest valid location; None if no location is usable."""
    best: int | None = None
    for location in chef.candidate_locations:
        distance = haversine(origin, location)
        if distance is None:
            logger.warning(
                "Skipping out-of-range chef location",
                extra={"chef_id": chef.id, "lat": location.lat, "lon": location.lon},
            )
            continue
        if best is None or distance < best:
            best = distance
    return best


def _rating_key(chef: ChefSummary) -> float:
    rating = chef.rating_average
    if rating is None or not math.isfinite(rating):
        return 0.0
    return rating


def rank_by_proximity(origin: GeoPoint | None, chefs: Iterable[ChefSummary]) -> list[ChefSummary]:
    """
    Order chefs by distance from ``origin``.

    Chefs with a known distance come first, closest first. The rest follow by
    rating, highest first, with a missing rating counted as 0. Both sorts are
    stable so ties keep directory order. Returns annotated copies.
    """
    if origin is not None and not origin.is_valid:
        logger.warning("Ignoring out-of-range origin", extra={"lat": origin.lat, "lon": origin.lon})
        origin = None

    located: list[ChefSummary] = []
    unlocated: list[ChefSummary] = []
    for chef in chefs:
        distance = closest_distance(origin, chef) if origin is not None else None
        if distance is None:
            unlocated.append(chef.with_distance(None))
        else:
            located.append(chef.with_distance(distance))

    located.sort(key=lambda c: c.distance_meters)
    unlocated.sort(key=_rating_key, reverse=True)
    return located + unlocated
