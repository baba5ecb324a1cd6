"""Region store abstract base class.

Defines the interface for all region stores (PostGIS, in-memory).
Consumers should use get_region_store() from services/__init__.py to get the
active backend.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from georegion.utils.geo import Coordinate, Ring


@dataclass(frozen=True)
class RegionRecord:
    """A stored region. ``ring`` is the outer ring as (lon, lat) pairs."""

    id: UUID
    name: str
    ring: list[Coordinate]
    created_at: datetime
    updated_at: datetime


class RegionStore(ABC):
    """Abstract base class for region stores.

    Every method may raise StoreUnavailableError when the backend cannot be
    reached. Geometry passed in has already been validated by the caller.
    """

    @abstractmethod
    async def create(self, name: str, ring: Ring) -> RegionRecord:
        """Persist a new region and return it with id and timestamps set."""
        ...

    @abstractmethod
    async def get(self, region_id: str) -> Optional[RegionRecord]:
        """Return the region, or None if it does not exist."""
        ...

    @abstractmethod
    async def update(
        self,
        region_id: str,
        name: Optional[str] = None,
        ring: Optional[Ring] = None,
    ) -> Optional[RegionRecord]:
        """Apply the supplied fields. Returns None if the region does not exist."""
        ...

    @abstractmethod
    async def delete(self, region_id: str) -> bool:
        """Delete a region. Returns False if it did not exist."""
        ...

    @abstractmethod
    async def list(self) -> list[RegionRecord]:
        """All regions, newest created first."""
        ...

    @abstractmethod
    async def find_containing(self, point: Coordinate) -> list[RegionRecord]:
        """Regions whose polygon contains ``point``, boundary included."""
        ...

    @abstractmethod
    async def find_within(self, point: Coordinate, radius_meters: float) -> list[RegionRecord]:
        """Regions within ``radius_meters`` of ``point``, nearest first."""
        ...


def parse_region_id(region_id) -> Optional[UUID]:
    """Coerce an id to UUID; malformed ids yield None so callers report not-found."""
    if isinstance(region_id, UUID):
        return region_id
    try:
        return UUID(str(region_id))
    except ValueError:
        return None
