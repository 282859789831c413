from __future__ import annotations

import math

from quote_engine.domain.entities.geo import GeoPoint

EARTH_RADIUS_METERS = 6_371_000


def haversine(a: GeoPoint, b: GeoPoint) -> int | None:
    """Great-circle distance in whole meters, or None if either point is out of range."""
    if not a.is_valid or not b.is_valid:
        return None

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Float error can push h marginally past 1 for antipodal points.
    h = min(1.0, h)
    distance = 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(h))
    return int(math.floor(distance + 0.5))


def format_distance_km(distance_meters: int | None) -> str | None:
    if distance_meters is None:
        return None
    return f"{distance_meters / 1000:.1f} km"
