"""
Get Event Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import EventResponse


class GetEventUseCase:
    """Single event with tags and both authors expanded"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_with_relations(event_id)
            if event is None:
                return Return.err(
                    Error("EVENT_NOT_FOUND", f'Event with ID "{event_id}" not found')
                )

            return Return.ok(EventResponse.from_entity(event, detailed=True))
