"""Region model."""
import uuid
from datetime import datetime
from sqlalchemy import DateTime, Index, String
from sqlalchemy.dialects.postgresql import UUID
from geoalchemy2 import Geometry
from sqlalchemy.orm import Mapped, mapped_column

from georegion.database import Base


class Region(Base):
    """Named polygon used for point and proximity lookups."""

    __tablename__ = "regions"
    __table_args__ = (
        Index("ix_regions_name", "name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Outer ring only, WGS84 lon/lat. GiST index is created by GeoAlchemy2.
    geom = mapped_column(Geometry("POLYGON", srid=4326, spatial_index=True), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )
