from __future__ import annotations

from abc import ABC, abstractmethod

from quote_engine.domain.entities.service_catalog import AddOn, ServiceCatalog, ServiceType


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_catalog(self) -> ServiceCatalog:
        """Return the full immutable catalog."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> ServiceType | None:
        """Get service type by id."""
        raise NotImplementedError

    @abstractmethod
    def get_add_ons(self, service_id: str) -> tuple[AddOn, ...]:
        """Get base add-ons followed by the service-specific ones."""
        raise NotImplementedError
