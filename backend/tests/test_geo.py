"""Tests for utils.geo: ring validation and distance units."""

import pytest

from georegion.errors import PolygonValidationError, UnsupportedUnitError
from georegion.utils.geo import (
    DistanceUnit,
    PolygonError,
    check_coordinate_ranges,
    ensure_valid_ring,
    to_meters,
    validate_ring,
)

from conftest import SAO_PAULO_RING


class TestValidateRing:
    @pytest.mark.parametrize("ring", [
        [],
        [[0, 0]],
        [[0, 0], [1, 0]],
        [[0, 0], [1, 0], [0, 0]],
        [[0, 0], [1, 0], [1, 1]],
    ])
    def test_fewer_than_four_points(self, ring):
        assert validate_ring(ring) is PolygonError.TOO_FEW_COORDINATES

    def test_none_ring(self):
        assert validate_ring(None) is PolygonError.TOO_FEW_COORDINATES

    @pytest.mark.parametrize("ring", [
        [[0, 0], [1, 0], [1, 1], [2, 2]],
        [[0, 0], [1, 0], [1, 1], [0, 0.000001]],
        [[0, 0], [1, 0], [1, 1], [0.000001, 0]],
        [[0, 0], [1, 0], [1, 1], [0, 1], [1, 0]],
    ])
    def test_open_ring(self, ring):
        assert validate_ring(ring) is PolygonError.NOT_CLOSED

    def test_closed_ring(self):
        assert validate_ring(SAO_PAULO_RING) is None

    def test_minimal_closed_ring(self):
        assert validate_ring([[0, 0], [1, 0], [1, 1], [0, 0]]) is None

    def test_validation_is_repeatable(self):
        assert validate_ring(SAO_PAULO_RING) is None
        assert validate_ring(SAO_PAULO_RING) is None

    def test_count_checked_before_closure(self):
        # Three open points: the count failure wins
        assert validate_ring([[0, 0], [1, 0], [2, 2]]) is PolygonError.TOO_FEW_COORDINATES

    def test_ranges_not_checked(self):
        ring = [[200, 100], [201, 100], [201, 101], [200, 100]]
        assert validate_ring(ring) is None


class TestCoordinateRanges:
    def test_in_range(self):
        assert check_coordinate_ranges(SAO_PAULO_RING) is None

    def test_edges_are_in_range(self):
        ring = [[-180, -90], [180, -90], [180, 90], [-180, -90]]
        assert check_coordinate_ranges(ring) is None

    @pytest.mark.parametrize("point", [[180.5, 0], [-181, 0], [0, 90.1], [0, -91]])
    def test_out_of_range(self, point):
        ring = [[0, 0], point, [1, 1], [0, 0]]
        assert check_coordinate_ranges(ring) is PolygonError.OUT_OF_RANGE


class TestEnsureValidRing:
    def test_raises_with_kind(self):
        with pytest.raises(PolygonValidationError) as exc_info:
            ensure_valid_ring([[0, 0], [1, 0], [1, 1], [2, 2]])
        assert exc_info.value.kind is PolygonError.NOT_CLOSED
        assert exc_info.value.code == "region.not_closed"
        assert exc_info.value.params == {"kind": "not_closed"}

    def test_range_check_is_opt_in(self):
        ring = [[200, 0], [201, 0], [201, 1], [200, 0]]
        ensure_valid_ring(ring)
        with pytest.raises(PolygonValidationError) as exc_info:
            ensure_valid_ring(ring, check_ranges=True)
        assert exc_info.value.code == "region.coordinates_out_of_range"


class TestToMeters:
    @pytest.mark.parametrize("distance", [0, 1, 2.5, 10, 123.456])
    def test_conversions(self, distance):
        assert to_meters(distance, DistanceUnit.METERS) == distance
        assert to_meters(distance, DistanceUnit.KILOMETERS) == distance * 1000
        assert to_meters(distance, DistanceUnit.MILES) == distance * 1609.34

    def test_accepts_strings(self):
        assert to_meters(10, "kilometers") == 10000
        assert to_meters(1, "miles") == 1609.34

    def test_defaults_to_meters(self):
        assert to_meters(42) == 42
        assert to_meters(42, None) == 42

    @pytest.mark.parametrize("unit", ["feet", "KILOMETERS", "", "km"])
    def test_unknown_unit(self, unit):
        with pytest.raises(UnsupportedUnitError) as exc_info:
            to_meters(1, unit)
        assert exc_info.value.code == "region.unsupported_unit"
        assert exc_info.value.params == {"unit": unit}
