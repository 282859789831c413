from __future__ import annotations

import logging

from quote_engine.application.ports.geocoder import GeocoderPort
from quote_engine.domain.entities.geo import GeoPoint

KNOWN_PLACES = {
    "mumbai": GeoPoint(lat=19.0760, lon=72.8777),
    "pune": GeoPoint(lat=18.5204, lon=73.8567),
    "delhi": GeoPoint(lat=28.6139, lon=77.2090),
    "bangalore": GeoPoint(lat=12.9716, lon=77.5946),
    "hyderabad": GeoPoint(lat=17.3850, lon=78.4867),
}


class MockGeocoder(GeocoderPort):
    def __init__(self, places: dict[str, GeoPoint] | None = None, record_calls: bool = False) -> None:
        self._places = {k.lower(): v for k, v in (places or KNOWN_PLACES).items()}
        self._record_calls = record_calls
        self.calls: list[str] = []
        self._logger = logging.getLogger(__name__)

    async def geocode(self, address_text: str) -> GeoPoint | None:
        address = (address_text or "").strip()
        if not address:
            return None
        if self._record_calls:
            self.calls.append(address)
        point = self._places.get(address.lower())
        self._logger.info("Mock geocode", extra={"address": address, "found": point is not None})
        return point
