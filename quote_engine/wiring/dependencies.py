from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from quote_engine.core.config import settings
from quote_engine.application.ports.chef_directory import ChefDirectoryPort
from quote_engine.application.ports.geocoder import GeocoderPort
from quote_engine.application.ports.service_catalog import ServiceCatalogPort
from quote_engine.application.use_cases.compute_quote import ComputeQuoteUseCase
from quote_engine.application.use_cases.search_chefs import SearchChefsUseCase
from quote_engine.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from quote_engine.infrastructure.directory.http_directory import HttpChefDirectory
from quote_engine.infrastructure.directory.memory_directory import InMemoryChefDirectory
from quote_engine.infrastructure.geocoding.mock_geocoder import MockGeocoder
from quote_engine.infrastructure.geocoding.proxy_geocoder import ProxyGeocoder


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local", "test"}


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_timezone() -> ZoneInfo:
    return ZoneInfo(settings.BUSINESS_TIMEZONE)


@lru_cache
def get_geocoder() -> GeocoderPort:
    if _is_local():
        logging.getLogger(__name__).info("Using MockGeocoder (ENV=%s)", settings.ENV)
        return MockGeocoder()
    return ProxyGeocoder()


@lru_cache
def get_chef_directory() -> ChefDirectoryPort:
    if not settings.CHEF_DIRECTORY_URL:
        logging.getLogger(__name__).info("Using InMemoryChefDirectory (CHEF_DIRECTORY_URL unset)")
        return InMemoryChefDirectory()
    return HttpChefDirectory()


def get_compute_quote_use_case() -> ComputeQuoteUseCase:
    return ComputeQuoteUseCase(
        catalog=get_service_catalog().get_catalog(),
        fallback_rate=settings.FALLBACK_PRICE_PER_HOUR,
        weekend_premium=settings.WEEKEND_PREMIUM,
    )


def get_search_chefs_use_case() -> SearchChefsUseCase:
    return SearchChefsUseCase(geocoder=get_geocoder(), directory=get_chef_directory())


async def close_adapters() -> None:
    """Close HTTP clients held by cached adapters; factories are cleared so a restart builds new ones."""
    for factory in (get_geocoder, get_chef_directory):
        if factory.cache_info().currsize == 0:
            continue
        adapter = factory()
        close = getattr(adapter, "aclose", None)
        if close is not None:
            await close()
        factory.cache_clear()
