"""In-memory region store.

Keeps regions in a dict and emulates the spatial operators with shapely
(containment) and pyproj (geodesic distance). Used by the test suite and for
running the API without PostGIS (REGION_STORE=memory).
"""
from __future__ import annotations

import itertools
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from pyproj import Transformer
from shapely.geometry import Point, Polygon
from shapely.ops import transform

from georegion.services.region_store_base import RegionRecord, RegionStore, parse_region_id
from georegion.utils.geo import Coordinate, Ring, normalize_ring

# Edges are split to this length (degrees) so they follow the geodesic closely
# once projected
MAX_EDGE_DEGREES = 0.01


def geodesic_distance_to_ring(point: Coordinate, ring: list[Coordinate]) -> float:
    """Meters from ``point`` to the polygon bounded by ``ring`` (0 if inside).

    The polygon is projected into an azimuthal equidistant CRS centred on
    ``point``, where the distance from the origin is the geodesic distance.
    """
    polygon = Polygon(ring)
    if polygon.covers(Point(point)):
        return 0.0

    lon, lat = point[0], point[1]
    local = Transformer.from_crs(
        "EPSG:4326",
        f"+proj=aeqd +lat_0={lat} +lon_0={lon} +datum=WGS84 +units=m",
        always_xy=True,
    )
    boundary = polygon.exterior.segmentize(MAX_EDGE_DEGREES)
    projected = transform(local.transform, boundary)
    return projected.distance(Point(0.0, 0.0))


class InMemoryRegionStore(RegionStore):
    """Region store backed by a dict."""

    def __init__(self):
        self._regions: dict[uuid.UUID, RegionRecord] = {}
        self._epoch = datetime.now(timezone.utc)
        # Strictly increasing timestamps keep newest-first ordering stable
        self._ticks = itertools.count(1)

    def _now(self) -> datetime:
        return self._epoch + timedelta(microseconds=next(self._ticks))

    async def create(self, name: str, ring: Ring) -> RegionRecord:
        now = self._now()
        record = RegionRecord(
            id=uuid.uuid4(),
            name=name,
            ring=normalize_ring(ring),
            created_at=now,
            updated_at=now,
        )
        self._regions[record.id] = record
        return record

    async def get(self, region_id: str) -> Optional[RegionRecord]:
        key = parse_region_id(region_id)
        if key is None:
            return None
        return self._regions.get(key)

    async def update(
        self,
        region_id: str,
        name: Optional[str] = None,
        ring: Optional[Ring] = None,
    ) -> Optional[RegionRecord]:
        current = await self.get(region_id)
        if current is None:
            return None

        changes = {"updated_at": self._now()}
        if name is not None:
            changes["name"] = name
        if ring is not None:
            changes["ring"] = normalize_ring(ring)
        record = replace(current, **changes)
        self._regions[record.id] = record
        return record

    async def delete(self, region_id: str) -> bool:
        key = parse_region_id(region_id)
        if key is None:
            return False
        return self._regions.pop(key, None) is not None

    async def list(self) -> list[RegionRecord]:
        return sorted(self._regions.values(), key=lambda r: r.created_at, reverse=True)

    async def find_containing(self, point: Coordinate) -> list[RegionRecord]:
        target = Point(point)
        return [
            record for record in await self.list()
            if Polygon(record.ring).covers(target)
        ]

    async def find_within(self, point: Coordinate, radius_meters: float) -> list[RegionRecord]:
        matches = []
        for record in await self.list():
            distance = geodesic_distance_to_ring(point, record.ring)
            if distance <= radius_meters:
                matches.append((distance, record))
        matches.sort(key=lambda item: item[0])
        return [record for _, record in matches]
