"""
Region Entity

Administrative/geographic area that events happen in.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utcnow

if TYPE_CHECKING:
    from .event import Event


class Region(SQLModel, table=True):
    """
    Region entity - administrative area with an optional boundary.

    Business Rules:
    - code is unique and is the stable identifier used by clients
    - center_lat/center_lng are derived from geometry
    - Never deleted while events reference it
    """

    __tablename__ = "regions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=20)

    name_ar: str = Field(max_length=255)
    name_en: Optional[str] = Field(default=None, max_length=255)

    # GeoJSON Polygon / MultiPolygon
    geometry: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    center_lat: Optional[float] = None
    center_lng: Optional[float] = None

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    events: list["Event"] = Relationship(back_populates="region")
