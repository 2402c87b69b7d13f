"""
List Region Events Use Case
"""

from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import EventResponse


class ListRegionEventsUseCase:
    """
    Every event of the region with the given code, oldest first.

    An unknown code yields an empty list rather than an error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, region_code: str) -> Result[List[EventResponse]]:
        async with self.uow:
            events = await self.uow.events.get_by_region_code(region_code)
            return Return.ok([EventResponse.from_entity(event) for event in events])
