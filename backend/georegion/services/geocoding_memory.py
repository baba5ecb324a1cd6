"""Static geocoding provider backed by a lookup table.

Used by the test suite and for local runs without a Google API key
(GEOCODER=static).
"""
from typing import Iterable, Optional

from georegion.services.geocoding_base import GeocodeResult, GeocodingProvider


def _key(address: str) -> str:
    return " ".join(address.lower().split())


class StaticGeocodingProvider(GeocodingProvider):
    """Resolves addresses from a fixed mapping.

    ``entries`` maps an address to its candidates in ranking order. Lookups
    are case and whitespace insensitive; the country hint is ignored.
    """

    def __init__(self, entries: Optional[dict[str, Iterable[GeocodeResult]]] = None):
        self._entries: dict[str, list[GeocodeResult]] = {}
        for address, results in (entries or {}).items():
            self.add(address, *results)
        # Every call, in order, for assertions in tests
        self.calls: list[tuple] = []

    def add(self, address: str, *results: GeocodeResult) -> None:
        self._entries.setdefault(_key(address), []).extend(results)

    async def forward_one(
        self, address: str, country_hint: Optional[str] = None
    ) -> Optional[GeocodeResult]:
        self.calls.append(("forward_one", address, country_hint))
        results = self._entries.get(_key(address or ""), [])
        return results[0] if results else None

    async def forward_all(
        self, address: str, country_hint: Optional[str] = None
    ) -> list[GeocodeResult]:
        self.calls.append(("forward_all", address, country_hint))
        return list(self._entries.get(_key(address or ""), []))

    async def reverse(self, latitude: float, longitude: float) -> Optional[GeocodeResult]:
        self.calls.append(("reverse", latitude, longitude))
        for results in self._entries.values():
            for result in results:
                if result.latitude == latitude and result.longitude == longitude:
                    return result
        return None
