"""Regions API endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from georegion.api.errors import ApiError
from georegion.schemas.region import (
    GeocodeResultResponse,
    RegionCreate,
    RegionResponse,
    RegionUpdate,
)
from georegion.services import RegionQueryEngine, get_query_engine

router = APIRouter(prefix="/regions", tags=["Regions"])


def _require_point(longitude: Optional[float], latitude: Optional[float]) -> tuple[float, float]:
    if longitude is None or latitude is None:
        raise ApiError("region.missing_point", status.HTTP_400_BAD_REQUEST)
    return (longitude, latitude)


@router.get("", response_model=List[RegionResponse])
async def list_regions(engine: RegionQueryEngine = Depends(get_query_engine)):
    """List all regions, newest first."""
    regions = await engine.list_regions()
    return [RegionResponse.from_record(r) for r in regions]


@router.post("", response_model=RegionResponse, status_code=status.HTTP_201_CREATED)
async def create_region(
    data: RegionCreate,
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """
    Create a new region.

    The polygon's outer ring must have at least 4 coordinates and its first
    and last coordinates must be equal.
    """
    region = await engine.create_region(data.name, data.geometry.outer_ring)
    return RegionResponse.from_record(region)


@router.get("/query/point", response_model=List[RegionResponse])
async def find_regions_by_point(
    longitude: Optional[float] = Query(None),
    latitude: Optional[float] = Query(None),
    address: Optional[str] = Query(None, min_length=1),
    country_code: Optional[str] = Query(None, alias="countryCode"),
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """
    Find regions containing a point.

    When ``address`` is given it is geocoded and takes precedence over
    ``longitude``/``latitude``. An address that cannot be resolved returns
    an empty list.
    """
    if address:
        regions = await engine.query_by_point_from_address(address, country_code)
    else:
        regions = await engine.query_by_point(_require_point(longitude, latitude))
    return [RegionResponse.from_record(r) for r in regions]


@router.get("/query/distance", response_model=List[RegionResponse])
async def find_regions_by_distance(
    distance: float = Query(..., ge=0),
    unit: str = Query("meters", description="meters, kilometers or miles"),
    longitude: Optional[float] = Query(None),
    latitude: Optional[float] = Query(None),
    address: Optional[str] = Query(None, min_length=1),
    country_code: Optional[str] = Query(None, alias="countryCode"),
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """Find regions within ``distance`` of a point or address, nearest first."""
    if address:
        regions = await engine.query_by_distance_from_address(
            address, distance, unit, country_code
        )
    else:
        regions = await engine.query_by_distance(
            _require_point(longitude, latitude), distance, unit
        )
    return [RegionResponse.from_record(r) for r in regions]


@router.get("/query/address", response_model=List[GeocodeResultResponse])
async def find_regions_by_address(
    address: str = Query(..., min_length=1),
    country_code: Optional[str] = Query(None, alias="countryCode"),
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """Resolve an address to its candidate locations, in provider ranking order."""
    results = await engine.query_by_address(address, country_code)
    return [GeocodeResultResponse.model_validate(r) for r in results]


@router.get("/{region_id}", response_model=RegionResponse)
async def get_region(
    region_id: str,
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """Get a specific region by ID."""
    region = await engine.get_region(region_id)
    return RegionResponse.from_record(region)


@router.put("/{region_id}", response_model=RegionResponse)
async def update_region(
    region_id: str,
    data: RegionUpdate,
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """Update a region's name and/or geometry."""
    ring = data.geometry.outer_ring if data.geometry is not None else None
    region = await engine.update_region(region_id, name=data.name, ring=ring)
    return RegionResponse.from_record(region)


@router.delete("/{region_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_region(
    region_id: str,
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """Delete a region."""
    await engine.delete_region(region_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
