"""Geocoding provider abstract base class.

Providers never raise for lookup failures: a failed call and an address with
no match both come back as None (single lookups) or an empty list.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeocodeResult:
    """A geocoded location. ``formatted_address`` is display-only."""

    latitude: float
    longitude: float
    formatted_address: str

    @property
    def point(self) -> tuple[float, float]:
        """(longitude, latitude), the order region queries expect."""
        return (self.longitude, self.latitude)


class GeocodingProvider(ABC):
    """Abstract base class for geocoding providers."""

    @abstractmethod
    async def forward_one(
        self, address: str, country_hint: Optional[str] = None
    ) -> Optional[GeocodeResult]:
        """Best match for ``address``, or None."""
        ...

    @abstractmethod
    async def forward_all(
        self, address: str, country_hint: Optional[str] = None
    ) -> list[GeocodeResult]:
        """All matches for ``address`` in provider ranking order."""
        ...

    @abstractmethod
    async def reverse(self, latitude: float, longitude: float) -> Optional[GeocodeResult]:
        """Address for a coordinate, or None."""
        ...

    async def aclose(self) -> None:
        """Release any network resources held by the provider."""
        return None
