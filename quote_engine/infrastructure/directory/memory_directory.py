from __future__ import annotations

import json
import logging
from pathlib import Path

from quote_engine.application.exceptions import ChefDirectoryError
from quote_engine.application.ports.chef_directory import ChefDirectoryPort
from quote_engine.domain.entities.chef import ChefSummary


class InMemoryChefDirectory(ChefDirectoryPort):
    def __init__(self, chefs: list[ChefSummary] | None = None) -> None:
        self._chefs = list(chefs or [])
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryChefDirectory":
        """Load a fixture file holding a list of chef records or ``{"chefs": [...]}``."""
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ChefDirectoryError(f"Failed to load chef fixtures from {path}: {e}") from e
        records = raw.get("chefs", []) if isinstance(raw, dict) else raw
        return cls([ChefSummary.from_payload(r) for r in records if isinstance(r, dict)])

    async def list_chefs(self) -> list[ChefSummary]:
        self._logger.debug("Listing in-memory chefs", extra={"count": len(self._chefs)})
        return list(self._chefs)
