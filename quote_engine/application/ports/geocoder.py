from __future__ import annotations

from abc import ABC, abstractmethod

from quote_engine.domain.entities.geo import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address_text: str) -> GeoPoint | None:
        """
        Resolve free-text address to coordinates.

        Requirements:
        - Blank input returns None without any network call
        - Zero results return None (not an error)
        - Only the first result is used
        - Transport failures are retried by the adapter; once exhausted, None is returned

        Args:
            address_text: Free-text address as typed by the user

        Returns:
            GeoPoint of the first match, or None
        """
        raise NotImplementedError
