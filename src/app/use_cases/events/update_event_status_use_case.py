"""
Update Event Status Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ReviewStatus
from .dtos import EventResponse


class UpdateEventStatusUseCase:
    """
    Use case for moving an event between review statuses.

    Business Rules:
    - Only review_status, updated_by and updated_at change
    - Any status may follow any other (no workflow restrictions)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, event_id: UUID, status: ReviewStatus, user_id: UUID
    ) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(
                    Error("EVENT_NOT_FOUND", f'Event with ID "{event_id}" not found')
                )

            event.review_status = status
            event.updated_by_id = user_id
            event.updated_at = utcnow()
            await self.uow.events.update(event)
            await self.uow.commit()

            updated = await self.uow.events.get_with_relations(event.id)
            return Return.ok(EventResponse.from_entity(updated, detailed=True))
