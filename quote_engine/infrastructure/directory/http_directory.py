from __future__ import annotations

import logging

import httpx

from quote_engine.application.exceptions import ChefDirectoryError
from quote_engine.application.ports.chef_directory import ChefDirectoryPort
from quote_engine.core.config import settings
from quote_engine.domain.entities.chef import ChefSummary


class HttpChefDirectory(ChefDirectoryPort):
    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.CHEF_DIRECTORY_URL or "").rstrip("/")
        self._token = token or settings.CHEF_DIRECTORY_TOKEN
        self._client = client or httpx.AsyncClient(timeout=10.0)
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("CHEF_DIRECTORY_URL is required for the HTTP chef directory")

    async def list_chefs(self) -> list[ChefSummary]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        try:
            response = await self._client.get(f"{self._base_url}/chefs", headers=headers)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("Error listing chefs", extra={"error": str(e)})
            raise ChefDirectoryError(f"Failed to fetch chefs: {e}") from e

        records = (data.get("chefs") or data.get("data") or []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise ChefDirectoryError("Chef directory returned an unexpected payload")

        chefs = [ChefSummary.from_payload(r) for r in records if isinstance(r, dict)]
        self._logger.info("Chefs fetched", extra={"count": len(chefs)})
        return chefs

    async def aclose(self) -> None:
        await self._client.aclose()
