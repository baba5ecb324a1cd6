"""Pydantic schemas for Region and geocoding responses."""
from datetime import datetime
from typing import Optional, List, Literal
from uuid import UUID
from pydantic import BaseModel, Field, conlist

from georegion.services.region_store_base import RegionRecord

# [longitude, latitude] (extra members such as altitude are accepted and dropped)
Position = conlist(float, min_length=2)


class GeoJSONPolygon(BaseModel):
    """GeoJSON Polygon. Only the first (outer) ring is used."""
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[Position]]

    @property
    def outer_ring(self) -> List[Position]:
        return self.coordinates[0] if self.coordinates else []

    @classmethod
    def from_ring(cls, ring) -> "GeoJSONPolygon":
        return cls(coordinates=[[[lon, lat] for lon, lat in ring]])


class RegionCreate(BaseModel):
    """Region creation schema."""
    name: str = Field(..., min_length=3, max_length=100)
    geometry: GeoJSONPolygon

    class Config:
        str_strip_whitespace = True


class RegionUpdate(BaseModel):
    """Region update schema. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    geometry: Optional[GeoJSONPolygon] = None

    class Config:
        str_strip_whitespace = True


class RegionResponse(BaseModel):
    """Region response schema."""
    id: UUID
    name: str
    geometry: GeoJSONPolygon
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: RegionRecord) -> "RegionResponse":
        return cls(
            id=record.id,
            name=record.name,
            geometry=GeoJSONPolygon.from_ring(record.ring),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class GeocodeResultResponse(BaseModel):
    """A geocoded location."""
    latitude: float
    longitude: float
    formatted_address: str

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    """Error body returned for domain errors."""
    success: bool = False
    code: str
    message: str
    params: dict = Field(default_factory=dict)
