"""
Delete Event Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse


class DeleteEventUseCase:
    """
    Use case for hard-deleting an event.

    Business Rules:
    - Links to sources, people and tags go with it
    - Sources, people and tags themselves are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(
                    Error("EVENT_NOT_FOUND", f'Event with ID "{event_id}" not found')
                )

            await self.uow.events.delete(event_id)
            await self.uow.commit()

            return Return.ok(
                MessageResponse(id=str(event_id), message="Event deleted successfully")
            )
