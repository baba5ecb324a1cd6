"""Tests for services.region_store_memory: in-memory spatial emulation."""

import uuid

import pytest
from pyproj import Geod

from georegion.seed import bbox_ring
from georegion.services.region_store_memory import InMemoryRegionStore, geodesic_distance_to_ring

from conftest import SAO_PAULO_RING

geod = Geod(ellps="WGS84")


def skewed_triangle(lat: float) -> list[tuple[float, float]]:
    """Triangle east of (0, lat) whose nearest point lies on its western edge."""
    return [(0.9, lat), (2.0, lat + 0.4), (0.0, lat + 0.8), (0.9, lat)]


def sampled_distance(point, ring, steps=2000) -> float:
    """Minimum geodesic distance from point to densely sampled ring edges."""
    best = float("inf")
    for (x0, y0), (x1, y1) in zip(ring, ring[1:]):
        for i in range(steps + 1):
            t = i / steps
            _, _, d = geod.inv(point[0], point[1], x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)
            best = min(best, d)
    return best


class TestCrud:
    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, store):
        region = await store.create("São Paulo", SAO_PAULO_RING)
        assert isinstance(region.id, uuid.UUID)
        assert region.name == "São Paulo"
        assert region.ring == [tuple(p) for p in SAO_PAULO_RING]
        assert region.created_at == region.updated_at

    @pytest.mark.asyncio
    async def test_timestamps_are_timezone_aware(self, store):
        region = await store.create("São Paulo", SAO_PAULO_RING)
        assert region.created_at.tzinfo is not None
        assert region.created_at.utcoffset().total_seconds() == 0

    @pytest.mark.asyncio
    async def test_get_accepts_uuid_and_string(self, store):
        region = await store.create("São Paulo", SAO_PAULO_RING)
        assert await store.get(region.id) == region
        assert await store.get(str(region.id)) == region

    @pytest.mark.asyncio
    async def test_get_unknown_or_malformed_id(self, store):
        assert await store.get(str(uuid.uuid4())) is None
        assert await store.get("not-a-uuid") is None

    @pytest.mark.asyncio
    async def test_update_partial(self, store):
        region = await store.create("São Paulo", SAO_PAULO_RING)
        renamed = await store.update(region.id, name="Sampa")
        assert renamed.name == "Sampa"
        assert renamed.ring == region.ring
        assert renamed.created_at == region.created_at
        assert renamed.updated_at > region.updated_at

        reshaped = await store.update(region.id, ring=bbox_ring(0, 0, 1, 1))
        assert reshaped.name == "Sampa"
        assert reshaped.ring[1] == (1.0, 0.0)

    @pytest.mark.asyncio
    async def test_update_missing(self, store):
        assert await store.update(str(uuid.uuid4()), name="x") is None

    @pytest.mark.asyncio
    async def test_delete(self, store):
        region = await store.create("São Paulo", SAO_PAULO_RING)
        assert await store.delete(region.id) is True
        assert await store.delete(region.id) is False
        assert await store.get(region.id) is None

    @pytest.mark.asyncio
    async def test_list_newest_first(self, store):
        first = await store.create("first", bbox_ring(0, 0, 1, 1))
        second = await store.create("second", bbox_ring(2, 2, 3, 3))
        third = await store.create("third", bbox_ring(4, 4, 5, 5))
        assert [r.id for r in await store.list()] == [third.id, second.id, first.id]


class TestSpatialQueries:
    @pytest.mark.asyncio
    async def test_find_containing(self, store):
        sp = await store.create("São Paulo", SAO_PAULO_RING)
        await store.create("Elsewhere", bbox_ring(0, 0, 1, 1))
        found = await store.find_containing((-46.6559, -23.5614))
        assert [r.id for r in found] == [sp.id]

    @pytest.mark.asyncio
    async def test_find_containing_includes_boundary(self, store):
        sp = await store.create("São Paulo", SAO_PAULO_RING)
        found = await store.find_containing((-46.641146, -23.55))
        assert [r.id for r in found] == [sp.id]

    @pytest.mark.asyncio
    async def test_find_containing_outside(self, store):
        await store.create("São Paulo", SAO_PAULO_RING)
        assert await store.find_containing((-43.1729, -22.9068)) == []

    @pytest.mark.asyncio
    async def test_find_within_radius(self, store):
        sp = await store.create("São Paulo", SAO_PAULO_RING)
        # ~10 km east of the eastern edge
        point = (-46.541146, -23.55)
        assert await store.find_within(point, 5000) == []
        assert [r.id for r in await store.find_within(point, 15000)] == [sp.id]

    @pytest.mark.asyncio
    async def test_find_within_nearest_first(self, store):
        far = await store.create("far", bbox_ring(0.5, 0, 0.6, 0.1))
        near = await store.create("near", bbox_ring(0.1, 0, 0.2, 0.1))
        found = await store.find_within((0, 0.05), 100_000)
        assert [r.id for r in found] == [near.id, far.id]

    @pytest.mark.asyncio
    async def test_point_inside_is_within_zero(self, store):
        sp = await store.create("São Paulo", SAO_PAULO_RING)
        assert [r.id for r in await store.find_within((-46.6559, -23.5614), 0)] == [sp.id]

    @pytest.mark.asyncio
    async def test_find_within_high_latitude(self, store):
        region = await store.create("Uusimaa", skewed_triangle(60.0))
        assert await store.find_within((0.0, 60.0), 40_000) == []
        assert [r.id for r in await store.find_within((0.0, 60.0), 48_000)] == [region.id]


class TestGeodesicDistance:
    def test_inside_is_zero(self):
        ring = [tuple(p) for p in SAO_PAULO_RING]
        assert geodesic_distance_to_ring((-46.6559, -23.5614), ring) == 0.0

    def test_one_degree_of_latitude(self):
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]
        distance = geodesic_distance_to_ring((0.5, 2.0), ring)
        assert distance == pytest.approx(110_574, rel=0.01)

    @pytest.mark.parametrize("lat", [0.0, 30.0, 45.0, 60.0, 75.0])
    def test_nearest_point_on_edge(self, lat):
        ring = skewed_triangle(lat)
        point = (0.0, lat)
        expected = sampled_distance(point, ring)
        assert geodesic_distance_to_ring(point, ring) == pytest.approx(expected, rel=1e-3)

    def test_high_latitude_is_closer_than_nearest_vertex(self):
        ring = skewed_triangle(60.0)
        _, _, to_vertex = geod.inv(0.0, 60.0, 0.9, 60.0)
        distance = geodesic_distance_to_ring((0.0, 60.0), ring)
        assert distance < to_vertex
        assert 40_000 < distance < 48_000

    def test_off_axis_vertex_at_mid_latitude(self):
        ring = [(10.5, 45.3), (11.5, 45.3), (11.5, 46.0), (10.5, 46.0), (10.5, 45.3)]
        _, _, expected = geod.inv(10.0, 45.0, 10.5, 45.3)
        assert geodesic_distance_to_ring((10.0, 45.0), ring) == pytest.approx(expected, rel=1e-4)
