from __future__ import annotations

import logging
from dataclasses import dataclass

from quote_engine.application.ports.chef_directory import ChefDirectoryPort
from quote_engine.application.ports.geocoder import GeocoderPort
from quote_engine.application.use_cases.rank_chefs import rank_by_proximity
from quote_engine.domain.entities.chef import ChefSummary
from quote_engine.domain.entities.geo import GeoPoint


@dataclass(frozen=True)
class SearchResult:
    origin: GeoPoint | None
    chefs: list[ChefSummary]

    @property
    def location_found(self) -> bool:
        return self.origin is not None


class SearchChefsUseCase:
    def __init__(self, geocoder: GeocoderPort, directory: ChefDirectoryPort) -> None:
        self._geocoder = geocoder
        self._directory = directory
        self._logger = logging.getLogger(__name__)

    async def search(self, location_text: str | None) -> SearchResult:
        """
        Geocode the customer's location and rank the directory around it.

        A blank or unresolvable location still returns every chef, ordered by
        rating. ChefDirectoryError from the directory propagates to the caller.
        """
        origin = await self._geocoder.geocode(location_text or "")
        chefs = await self._directory.list_chefs()

        if location_text and location_text.strip() and origin is None:
            self._logger.info(
                "Location not found, falling back to rating order",
                extra={"address": location_text.strip(), "reason": "no_geocode"},
            )

        return SearchResult(origin=origin, chefs=rank_by_proximity(origin, chefs))
