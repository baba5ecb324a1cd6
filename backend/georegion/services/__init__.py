"""Service exports and backend selection."""
from functools import lru_cache

from georegion.config import get_settings
from georegion.services.geocoding_base import GeocodeResult, GeocodingProvider
from georegion.services.region_query import RegionQueryEngine
from georegion.services.region_store_base import RegionRecord, RegionStore


@lru_cache()
def get_region_store() -> RegionStore:
    """Get the configured region store (REGION_STORE)."""
    settings = get_settings()
    if settings.REGION_STORE == "memory":
        from georegion.services.region_store_memory import InMemoryRegionStore
        return InMemoryRegionStore()
    if settings.REGION_STORE == "postgis":
        from georegion.database import async_session
        from georegion.services.region_store_postgis import PostGISRegionStore
        return PostGISRegionStore(async_session)
    raise ValueError(f"Unknown REGION_STORE: {settings.REGION_STORE}")


@lru_cache()
def get_geocoder() -> GeocodingProvider:
    """Get the configured geocoding provider (GEOCODER)."""
    settings = get_settings()
    if settings.GEOCODER == "static":
        from georegion.services.geocoding_memory import StaticGeocodingProvider
        return StaticGeocodingProvider()
    if settings.GEOCODER == "google":
        from georegion.services.geocoding_google import GoogleGeocodingProvider
        return GoogleGeocodingProvider()
    raise ValueError(f"Unknown GEOCODER: {settings.GEOCODER}")


def get_query_engine() -> RegionQueryEngine:
    """FastAPI dependency: query engine over the configured backends."""
    return RegionQueryEngine(
        store=get_region_store(),
        geocoder=get_geocoder(),
        validate_ranges=get_settings().VALIDATE_COORDINATE_RANGES,
    )


__all__ = [
    "GeocodeResult",
    "GeocodingProvider",
    "RegionQueryEngine",
    "RegionRecord",
    "RegionStore",
    "get_geocoder",
    "get_query_engine",
    "get_region_store",
]
