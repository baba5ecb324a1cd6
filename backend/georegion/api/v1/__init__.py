"""API v1 router aggregation."""
from fastapi import APIRouter

from georegion.api.v1.regions import router as regions_router
from georegion.api.v1.geocoding import router as geocoding_router

router = APIRouter()

router.include_router(regions_router)
router.include_router(geocoding_router)
