"""PostGIS region store.

Uses the database's spatial operators directly:
ST_Covers for point containment (boundary inclusive) and ST_DWithin /
ST_Distance on geography for proximity in meters.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from geoalchemy2 import Geography
from geoalchemy2.shape import from_shape, to_shape
from shapely.geometry import Polygon
from sqlalchemy import cast, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from georegion.errors import StoreUnavailableError
from georegion.models.region import Region
from georegion.services.region_store_base import RegionRecord, RegionStore, parse_region_id
from georegion.utils.geo import Coordinate, Ring, normalize_ring

logger = logging.getLogger("georegion.store.postgis")

SRID = 4326


def _to_record(row: Region) -> RegionRecord:
    shape = to_shape(row.geom)
    return RegionRecord(
        id=row.id,
        name=row.name,
        ring=[(x, y) for x, y, *_ in shape.exterior.coords],
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _polygon(ring: Ring):
    return from_shape(Polygon(normalize_ring(ring)), srid=SRID)


def _point(point: Coordinate):
    return func.ST_SetSRID(func.ST_MakePoint(point[0], point[1]), SRID)


class PostGISRegionStore(RegionStore):
    """Region store backed by a PostGIS table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self):
        """Open a session, translating driver/connection failures."""
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Region store failure: {e}")
            raise StoreUnavailableError(type(e).__name__) from e

    async def create(self, name: str, ring: Ring) -> RegionRecord:
        async with self._session() as db:
            region = Region(name=name, geom=_polygon(ring))
            db.add(region)
            await db.commit()
            await db.refresh(region)
            return _to_record(region)

    async def get(self, region_id: str) -> Optional[RegionRecord]:
        key = parse_region_id(region_id)
        if key is None:
            return None
        async with self._session() as db:
            region = await db.get(Region, key)
            return _to_record(region) if region else None

    async def update(
        self,
        region_id: str,
        name: Optional[str] = None,
        ring: Optional[Ring] = None,
    ) -> Optional[RegionRecord]:
        key = parse_region_id(region_id)
        if key is None:
            return None
        async with self._session() as db:
            region = await db.get(Region, key)
            if region is None:
                return None
            if name is not None:
                region.name = name
            if ring is not None:
                region.geom = _polygon(ring)
            await db.commit()
            await db.refresh(region)
            return _to_record(region)

    async def delete(self, region_id: str) -> bool:
        key = parse_region_id(region_id)
        if key is None:
            return False
        async with self._session() as db:
            result = await db.execute(delete(Region).where(Region.id == key))
            await db.commit()
            return result.rowcount > 0

    async def list(self) -> list[RegionRecord]:
        async with self._session() as db:
            result = await db.execute(select(Region).order_by(Region.created_at.desc()))
            return [_to_record(row) for row in result.scalars().all()]

    async def find_containing(self, point: Coordinate) -> list[RegionRecord]:
        async with self._session() as db:
            result = await db.execute(
                select(Region)
                .where(func.ST_Covers(Region.geom, _point(point)))
                .order_by(Region.created_at.desc())
            )
            return [_to_record(row) for row in result.scalars().all()]

    async def find_within(self, point: Coordinate, radius_meters: float) -> list[RegionRecord]:
        region_geog = cast(Region.geom, Geography(srid=SRID))
        point_geog = cast(_point(point), Geography(srid=SRID))
        async with self._session() as db:
            result = await db.execute(
                select(Region)
                .where(func.ST_DWithin(region_geog, point_geog, radius_meters))
                .order_by(func.ST_Distance(region_geog, point_geog))
            )
            return [_to_record(row) for row in result.scalars().all()]
