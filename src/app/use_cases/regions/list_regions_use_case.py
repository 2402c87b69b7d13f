"""
List Regions Use Case
"""

from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RegionResponse


class ListRegionsUseCase:
    """All regions ordered by code, each with a live event count"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[RegionResponse]]:
        async with self.uow:
            regions = await self.uow.regions.list()
            counts = await self.uow.regions.event_counts()

            return Return.ok(
                [RegionResponse.from_entity(r, counts.get(r.id, 0)) for r in regions]
            )
