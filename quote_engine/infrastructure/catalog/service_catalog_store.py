from __future__ import annotations

from quote_engine.application.ports.service_catalog import ServiceCatalogPort
from quote_engine.domain.entities.service_catalog import AddOn, ServiceCatalog, ServiceType
from quote_engine.infrastructure.catalog.catalog_data import SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: ServiceCatalog | None = None) -> None:
        self._catalog = catalog or SERVICE_CATALOG

    def get_catalog(self) -> ServiceCatalog:
        return self._catalog

    def get_service(self, service_id: str) -> ServiceType | None:
        return self._catalog.get_service(service_id)

    def get_add_ons(self, service_id: str) -> tuple[AddOn, ...]:
        return self._catalog.add_ons_for(service_id)
