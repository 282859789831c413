from __future__ import annotations

from abc import ABC, abstractmethod

from quote_engine.domain.entities.chef import ChefSummary


class ChefDirectoryPort(ABC):
    @abstractmethod
    async def list_chefs(self) -> list[ChefSummary]:
        """List chefs in directory order. Raises ChefDirectoryError on failure."""
        raise NotImplementedError
