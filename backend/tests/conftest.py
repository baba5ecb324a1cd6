"""
Shared test fixtures.

Tests run against the in-memory region store and the static geocoder; no
database or network access is needed.
"""

import os

os.environ.setdefault("REGION_STORE", "memory")
os.environ.setdefault("GEOCODER", "static")

import pytest

from georegion.services.geocoding_base import GeocodeResult
from georegion.services.geocoding_memory import StaticGeocodingProvider
from georegion.services.region_query import RegionQueryEngine
from georegion.services.region_store_memory import InMemoryRegionStore

SAO_PAULO_RING = [
    [-46.693419, -23.568704],
    [-46.641146, -23.568704],
    [-46.641146, -23.525024],
    [-46.693419, -23.525024],
    [-46.693419, -23.568704],
]

# Avenida Paulista, inside SAO_PAULO_RING
PAULISTA = GeocodeResult(
    latitude=-23.5614,
    longitude=-46.6559,
    formatted_address="Av. Paulista, São Paulo - SP, Brasil",
)
# Rio de Janeiro, roughly 360 km away
RIO = GeocodeResult(
    latitude=-22.9068,
    longitude=-43.1729,
    formatted_address="Rio de Janeiro - RJ, Brasil",
)


@pytest.fixture
def store():
    return InMemoryRegionStore()


@pytest.fixture
def geocoder():
    return StaticGeocodingProvider({
        "Avenida Paulista, São Paulo": [PAULISTA],
        "Paulista": [PAULISTA, RIO],
    })


@pytest.fixture
def engine(store, geocoder):
    return RegionQueryEngine(store=store, geocoder=geocoder)
