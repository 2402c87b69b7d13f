"""
Create / Update Region Use Cases

Administrative writes. The centroid is always derived from the geometry.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Region
from src.domain.geo import ring_centroid
from .dtos import CreateRegionCommand, RegionResponse, UpdateRegionCommand


def _apply_geometry(region: Region, geometry: dict) -> None:
    region.geometry = geometry
    centroid = ring_centroid(geometry)
    region.center_lat, region.center_lng = centroid if centroid else (None, None)


class CreateRegionUseCase:
    """
    Use case for adding a region.

    Business Rules:
    - code must be unique
    - center_lat/center_lng come from the first ring of the geometry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateRegionCommand) -> Result[RegionResponse]:
        async with self.uow:
            existing = await self.uow.regions.get_by_code(command.code)
            if existing:
                return Return.err(
                    Error("REGION_CODE_EXISTS", f'Region with code "{command.code}" already exists')
                )

            region = Region(code=command.code, name_ar=command.name_ar, name_en=command.name_en)
            if command.geometry is not None:
                _apply_geometry(region, command.geometry.model_dump())

            region = await self.uow.regions.create(region)
            await self.uow.commit()

            return Return.ok(RegionResponse.from_entity(region, 0))


class UpdateRegionUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, region_id: UUID, command: UpdateRegionCommand) -> Result[RegionResponse]:
        async with self.uow:
            region = await self.uow.regions.get_by_id(region_id)
            if region is None:
                return Return.err(
                    Error("REGION_NOT_FOUND", f'Region with ID "{region_id}" not found')
                )

            changes = command.model_dump(exclude_unset=True, exclude={"geometry"})
            for field, value in changes.items():
                if value is None and field == "name_ar":
                    continue
                setattr(region, field, value)

            if "geometry" in command.model_fields_set:
                if command.geometry is None:
                    region.geometry = None
                    region.center_lat = region.center_lng = None
                else:
                    _apply_geometry(region, command.geometry.model_dump())

            region = await self.uow.regions.update(region)
            await self.uow.commit()

            counts = await self.uow.regions.event_counts()
            return Return.ok(RegionResponse.from_entity(region, counts.get(region.id, 0)))
