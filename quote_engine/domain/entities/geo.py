from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    @property
    def is_valid(self) -> bool:
        return (
            math.isfinite(self.lat)
            and math.isfinite(self.lon)
            and abs(self.lat) <= 90
            and abs(self.lon) <= 180
        )

    @staticmethod
    def from_lat_lon(pair: Sequence[Any]) -> "GeoPoint":
        """Build from a ``[lat, lon]`` pair."""
        if isinstance(pair, (str, bytes)) or len(pair) != 2:
            raise ValueError(f"Expected [lat, lon] pair, got {pair!r}")
        return GeoPoint(lat=float(pair[0]), lon=float(pair[1]))

    @staticmethod
    def from_lon_lat(pair: Sequence[Any]) -> "GeoPoint":
        """Build from a GeoJSON-ordered ``[lon, lat]`` pair."""
        if isinstance(pair, (str, bytes)) or len(pair) < 2:
            raise ValueError(f"Expected [lon, lat] pair, got {pair!r}")
        return GeoPoint(lat=float(pair[1]), lon=float(pair[0]))

    @staticmethod
    def from_payload(raw: Any) -> "GeoPoint | None":
        """
        Normalize any boundary representation into a GeoPoint.

        Accepts a GeoPoint, a ``{lat, lon}`` / ``{latitude, longitude}`` mapping,
        or a ``[lat, lon]`` sequence. Returns None for missing or unparseable input.
        """
        if raw is None:
            return None
        if isinstance(raw, GeoPoint):
            return raw
        try:
            if isinstance(raw, Mapping):
                lat = raw.get("lat", raw.get("latitude"))
                lon = raw.get("lon", raw.get("lng", raw.get("longitude")))
                if lat is None or lon is None:
                    return None
                return GeoPoint(lat=float(lat), lon=float(lon))
            if isinstance(raw, Sequence):
                return GeoPoint.from_lat_lon(raw)
        except (TypeError, ValueError):
            return None
        return None

    def as_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}
