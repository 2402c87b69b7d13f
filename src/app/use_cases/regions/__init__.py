"""
Region Use Cases

All region-related business logic.
"""

from .list_regions_use_case import ListRegionsUseCase
from .get_region_use_case import GetRegionByCodeUseCase, GetRegionUseCase
from .get_regions_geojson_use_case import GetRegionsGeoJsonUseCase
from .save_region_use_case import CreateRegionUseCase, UpdateRegionUseCase
from .dtos import (
    CreateRegionCommand,
    UpdateRegionCommand,
    RegionResponse,
    RegionDetailResponse,
    FeatureCollection,
)

__all__ = [
    # Use Cases
    "ListRegionsUseCase",
    "GetRegionUseCase",
    "GetRegionByCodeUseCase",
    "GetRegionsGeoJsonUseCase",
    "CreateRegionUseCase",
    "UpdateRegionUseCase",
    # DTOs
    "CreateRegionCommand",
    "UpdateRegionCommand",
    "RegionResponse",
    "RegionDetailResponse",
    "FeatureCollection",
]
