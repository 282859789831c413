from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from quote_engine.application.exceptions import GeocoderContractError, GeocoderUpstreamError
from quote_engine.application.ports.geocoder import GeocoderPort
from quote_engine.core.config import settings
from quote_engine.domain.entities.geo import GeoPoint
from quote_engine.infrastructure.geocoding.retry_policy import RetryPolicy, SleepFn


def parse_geocode_payload(payload: Any) -> GeoPoint | None:
    """
    Read the first candidate from a geocoding response.

    Understands the marketplace proxy shape (``{"success", "data": {"latitude",
    "longitude"}}``), a raw provider FeatureCollection (``[lon, lat]`` GeoJSON
    order) and a plain list of ``{lat, lon, label}`` candidates.
    """
    try:
        if isinstance(payload, list):
            if not payload:
                return None
            point = GeoPoint.from_payload(payload[0])
        elif isinstance(payload, dict) and "success" in payload:
            if not payload.get("success"):
                return None
            point = GeoPoint.from_payload(payload.get("data"))
        elif isinstance(payload, dict) and "features" in payload:
            features = payload.get("features") or []
            if not features:
                return None
            point = GeoPoint.from_lon_lat(features[0]["geometry"]["coordinates"])
        else:
            raise GeocoderContractError(f"Unrecognised geocode payload: {type(payload).__name__}")
    except (KeyError, TypeError, ValueError) as e:
        raise GeocoderContractError(f"Malformed geocode candidate: {e}") from e

    if point is None or not point.is_valid:
        raise GeocoderContractError(f"Invalid coordinates in geocode candidate: {point!r}")
    return point


class ProxyGeocoder(GeocoderPort):
    def __init__(
        self,
        proxy_url: str | None = None,
        policy: RetryPolicy | None = None,
        client: httpx.AsyncClient | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._proxy_url = proxy_url or settings.GEOCODER_PROXY_URL
        self._policy = policy or RetryPolicy(
            max_attempts=settings.GEOCODER_MAX_ATTEMPTS,
            base_delay_seconds=settings.GEOCODER_BACKOFF_BASE_SECONDS,
            timeout_seconds=settings.GEOCODER_TIMEOUT_SECONDS,
        )
        self._client = client or httpx.AsyncClient(timeout=self._policy.timeout_seconds)
        self._sleep = sleep
        self._logger = logging.getLogger(__name__)

    async def geocode(self, address_text: str) -> GeoPoint | None:
        address = (address_text or "").strip()
        if not address:
            return None

        try:
            payload = await self._fetch_with_retry(address)
        except GeocoderUpstreamError as e:
            self._logger.error(
                "Geocoding failed after retries",
                extra={"address": address, "attempt": self._policy.max_attempts, "error": str(e)},
            )
            return None
        except GeocoderContractError as e:
            self._logger.error("Geocoder returned unreadable body", extra={"address": address, "error": str(e)})
            return None

        if payload is None:
            return None

        try:
            point = parse_geocode_payload(payload)
        except GeocoderContractError as e:
            self._logger.error("Geocoder returned malformed result", extra={"address": address, "error": str(e)})
            return None

        if point is None:
            self._logger.info("No geocoding results", extra={"address": address})
        return point

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _fetch_with_retry(self, address: str) -> Any:
        async for attempt in self._policy.retrying(sleep=self._sleep):
            with attempt:
                return await self._fetch_once(address)
        raise GeocoderUpstreamError("Geocoder retry loop ended without a result")

    async def _fetch_once(self, address: str) -> Any:
        try:
            response = await asyncio.wait_for(
                self._client.get(self._proxy_url, params={"address": address}),
                timeout=self._policy.timeout_seconds,
            )
        except (httpx.TransportError, asyncio.TimeoutError) as e:
            raise GeocoderUpstreamError(str(e) or type(e).__name__) from e

        if response.status_code >= 400:
            self._logger.warning(
                "Geocoder proxy returned error status",
                extra={"address": address, "status": response.status_code},
            )
            return None

        try:
            return response.json()
        except ValueError as e:
            raise GeocoderContractError(f"Geocoder response is not JSON: {e}") from e
