"""Geocoding API endpoints."""
from fastapi import APIRouter, Depends, Query, status

from georegion.api.errors import ApiError
from georegion.schemas.region import GeocodeResultResponse
from georegion.services import RegionQueryEngine, get_query_engine

router = APIRouter(prefix="/geocode", tags=["Geocoding"])


@router.get("/reverse", response_model=GeocodeResultResponse)
async def reverse_geocode(
    longitude: float = Query(...),
    latitude: float = Query(...),
    engine: RegionQueryEngine = Depends(get_query_engine),
):
    """Look up the address at a coordinate."""
    result = await engine.describe_point((longitude, latitude))
    if result is None:
        raise ApiError("geocode.not_found", status.HTTP_404_NOT_FOUND)
    return GeocodeResultResponse.model_validate(result)
