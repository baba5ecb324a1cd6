"""Region query engine.

Validates input, normalizes distance units and resolves addresses before
delegating to the region store. Holds no state of its own; concurrent calls
are as safe as the store underneath. Store and geocoder calls are never
retried here.
"""
import logging
from typing import Optional, Union

from georegion.errors import RegionNotFoundError
from georegion.services.geocoding_base import GeocodeResult, GeocodingProvider
from georegion.services.region_store_base import RegionRecord, RegionStore
from georegion.utils.geo import Coordinate, DistanceUnit, Ring, ensure_valid_ring, to_meters

logger = logging.getLogger("georegion.query")

Unit = Union[DistanceUnit, str, None]


class RegionQueryEngine:
    """Region CRUD and spatial queries over a store and a geocoder."""

    def __init__(
        self,
        store: RegionStore,
        geocoder: GeocodingProvider,
        validate_ranges: bool = False,
    ):
        self.store = store
        self.geocoder = geocoder
        self.validate_ranges = validate_ranges

    # --- CRUD ---

    async def list_regions(self) -> list[RegionRecord]:
        return await self.store.list()

    async def get_region(self, region_id) -> RegionRecord:
        region = await self.store.get(region_id)
        if region is None:
            raise RegionNotFoundError(region_id)
        return region

    async def create_region(self, name: str, ring: Ring) -> RegionRecord:
        """Validate the ring and persist a new region."""
        ensure_valid_ring(ring, check_ranges=self.validate_ranges)
        region = await self.store.create(name, ring)
        logger.info(f"Created region {region.id} ({region.name})")
        return region

    async def update_region(
        self,
        region_id,
        name: Optional[str] = None,
        ring: Optional[Ring] = None,
    ) -> RegionRecord:
        """Update name and/or geometry. Geometry is re-validated only when supplied."""
        if ring is not None:
            ensure_valid_ring(ring, check_ranges=self.validate_ranges)
        region = await self.store.update(region_id, name=name, ring=ring)
        if region is None:
            raise RegionNotFoundError(region_id)
        return region

    async def delete_region(self, region_id) -> None:
        if not await self.store.delete(region_id):
            raise RegionNotFoundError(region_id)
        logger.info(f"Deleted region {region_id}")

    # --- Spatial queries ---

    async def query_by_point(self, point: Coordinate) -> list[RegionRecord]:
        return await self.store.find_containing(point)

    async def query_by_distance(
        self,
        point: Coordinate,
        distance: float,
        unit: Unit = DistanceUnit.METERS,
    ) -> list[RegionRecord]:
        radius = to_meters(distance, unit)
        return await self.store.find_within(point, radius)

    # --- Address-based queries ---
    # An address that cannot be resolved yields no regions, never an error.

    async def query_by_point_from_address(
        self, address: str, country_hint: Optional[str] = None
    ) -> list[RegionRecord]:
        location = await self.geocoder.forward_one(address, country_hint)
        if location is None:
            logger.info(f"Address not resolved, returning no regions: {address!r}")
            return []
        return await self.query_by_point(location.point)

    async def query_by_distance_from_address(
        self,
        address: str,
        distance: float,
        unit: Unit = DistanceUnit.METERS,
        country_hint: Optional[str] = None,
    ) -> list[RegionRecord]:
        radius = to_meters(distance, unit)
        location = await self.geocoder.forward_one(address, country_hint)
        if location is None:
            logger.info(f"Address not resolved, returning no regions: {address!r}")
            return []
        return await self.store.find_within(location.point, radius)

    async def query_by_address(
        self, address: str, country_hint: Optional[str] = None
    ) -> list[GeocodeResult]:
        """Candidate locations for ``address``, as ranked by the provider."""
        return await self.geocoder.forward_all(address, country_hint)

    async def describe_point(self, point: Coordinate) -> Optional[GeocodeResult]:
        """Reverse-geocode a (lon, lat) point."""
        return await self.geocoder.reverse(point[1], point[0])
