"""
Get Region Use Cases

Lookup by opaque id and lookup by external code are separate operations:
a code is never interpreted as an id, nor the other way round.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.events.dtos import EventResponse
from src.domain.entities import Region
from .dtos import RegionDetailResponse

# Events embedded in the by-id view
RECENT_EVENTS_LIMIT = 20


async def _detail(uow: UnitOfWork, region: Region, limit: Optional[int] = None) -> RegionDetailResponse:
    events = await uow.events.get_by_region_code(region.code)
    counts = await uow.regions.event_counts()
    response = RegionDetailResponse.from_entity(region, counts.get(region.id, 0))
    response.events = [EventResponse.from_entity(e) for e in events[:limit]]
    return response


class GetRegionUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, region_id: UUID) -> Result[RegionDetailResponse]:
        async with self.uow:
            region = await self.uow.regions.get_by_id(region_id)
            if region is None:
                return Return.err(
                    Error("REGION_NOT_FOUND", f'Region with ID "{region_id}" not found')
                )

            return Return.ok(await _detail(self.uow, region, RECENT_EVENTS_LIMIT))


class GetRegionByCodeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code: str) -> Result[RegionDetailResponse]:
        async with self.uow:
            region = await self.uow.regions.get_by_code(code)
            if region is None:
                return Return.err(
                    Error("REGION_NOT_FOUND", f'Region with code "{code}" not found')
                )

            return Return.ok(await _detail(self.uow, region))
