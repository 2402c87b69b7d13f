"""
Get Event Statistics Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import EventStatisticsResponse, StatusCount, TypeCount


class GetEventStatisticsUseCase:
    """Totals by type and review status, and how many regions have events"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[EventStatisticsResponse]:
        async with self.uow:
            total = await self.uow.events.count()
            by_type = await self.uow.events.count_by_type()
            by_status = await self.uow.events.count_by_status()
            regions_with_events = await self.uow.events.count_regions_with_events()

            return Return.ok(
                EventStatisticsResponse(
                    total=total,
                    by_type=[TypeCount(type=t, count=c) for t, c in by_type.items()],
                    by_status=[StatusCount(status=s, count=c) for s, c in by_status.items()],
                    regions_with_events=regions_with_events,
                )
            )
