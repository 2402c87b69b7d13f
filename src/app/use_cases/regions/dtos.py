"""
Region Use Case DTOs
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from src.app.use_cases.dtos import CamelModel
from src.app.use_cases.events.dtos import EventResponse
from src.domain.entities import Region


class RegionGeometry(CamelModel):
    """GeoJSON Polygon or MultiPolygon"""

    type: Literal["Polygon", "MultiPolygon"]
    coordinates: List[Any]


class CreateRegionCommand(CamelModel):
    code: str = Field(..., min_length=1, max_length=20)
    name_ar: str = Field(..., min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    geometry: Optional[RegionGeometry] = None


class UpdateRegionCommand(CamelModel):
    """Code is immutable once clients start filtering by it"""

    name_ar: Optional[str] = Field(None, min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    geometry: Optional[RegionGeometry] = None


class RegionResponse(CamelModel):
    id: str
    code: str
    name_ar: str
    name_en: Optional[str] = None
    geometry: Optional[Dict[str, Any]] = None
    center_lat: Optional[float] = None
    center_lng: Optional[float] = None
    created_at: datetime
    event_count: int = 0

    @classmethod
    def from_entity(cls, region: Region, event_count: int = 0) -> "RegionResponse":
        return cls(
            id=str(region.id),
            code=region.code,
            name_ar=region.name_ar,
            name_en=region.name_en,
            geometry=region.geometry,
            center_lat=region.center_lat,
            center_lng=region.center_lng,
            created_at=region.created_at,
            event_count=event_count,
        )


class RegionDetailResponse(RegionResponse):
    """Region with its events, oldest first"""

    events: List[EventResponse] = []


# GeoJSON keeps its own snake_case property names
class FeatureProperties(BaseModel):
    id: str
    code: str
    name_ar: str
    name_en: Optional[str] = None
    event_count: int


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties
    geometry: Dict[str, Any]


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature]
