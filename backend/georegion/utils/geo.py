"""Polygon validation and distance unit helpers."""
from enum import Enum
from typing import Optional, Sequence, Union

from georegion.errors import PolygonValidationError, UnsupportedUnitError

Coordinate = tuple[float, float]  # (longitude, latitude)
Ring = Sequence[Sequence[float]]

MIN_RING_COORDINATES = 4

METERS_PER_UNIT = {
    "meters": 1.0,
    "kilometers": 1000.0,
    "miles": 1609.34,
}


class PolygonError(str, Enum):
    """Reasons a ring is rejected."""

    TOO_FEW_COORDINATES = "too_few_coordinates"
    NOT_CLOSED = "not_closed"
    OUT_OF_RANGE = "coordinates_out_of_range"

    @property
    def code(self) -> str:
        return f"region.{self.value}"


class DistanceUnit(str, Enum):
    METERS = "meters"
    KILOMETERS = "kilometers"
    MILES = "miles"


def validate_ring(ring: Ring) -> Optional[PolygonError]:
    """Check that a ring is a closed loop of at least four coordinates.

    Returns the first problem found, or None for a well-formed ring.
    First and last coordinates must match exactly; no tolerance is applied.
    Self-intersection, winding order and coordinate ranges are not checked.
    """
    if ring is None or len(ring) < MIN_RING_COORDINATES:
        return PolygonError.TOO_FEW_COORDINATES

    first, last = ring[0], ring[-1]
    if len(first) < 2 or len(last) < 2 or first[0] != last[0] or first[1] != last[1]:
        return PolygonError.NOT_CLOSED
    return None


def check_coordinate_ranges(ring: Ring) -> Optional[PolygonError]:
    """Return OUT_OF_RANGE if any longitude/latitude falls outside WGS84 bounds."""
    for point in ring:
        lon, lat = point[0], point[1]
        if not (-180.0 <= lon <= 180.0 and -90.0 <= lat <= 90.0):
            return PolygonError.OUT_OF_RANGE
    return None


def ensure_valid_ring(ring: Ring, check_ranges: bool = False) -> None:
    """Raise PolygonValidationError for the first problem with ``ring``."""
    error = validate_ring(ring)
    if error is None and check_ranges:
        error = check_coordinate_ranges(ring)
    if error is not None:
        raise PolygonValidationError(error)


def to_meters(distance: float, unit: Union[DistanceUnit, str, None] = DistanceUnit.METERS) -> float:
    """Convert ``distance`` expressed in ``unit`` to meters.

    A missing unit means meters.
    """
    if unit is None:
        return float(distance)
    key = unit.value if isinstance(unit, DistanceUnit) else unit
    try:
        factor = METERS_PER_UNIT[key]
    except (KeyError, TypeError):
        raise UnsupportedUnitError(unit) from None
    return distance * factor


def normalize_ring(ring: Ring) -> list[Coordinate]:
    """Copy a ring into a list of (lon, lat) float tuples, dropping any altitude."""
    return [(float(point[0]), float(point[1])) for point in ring]
