"""
Update Event Use Case

Partial update of an event's content and links.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.event_repository import PersonLink, SourceLink
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import EventResponse, UpdateEventCommand
from .validation import check_event_dates, check_references

RELATION_FIELDS = {"source_ids", "person_ids", "tag_ids"}


class UpdateEventUseCase:
    """
    Use case for editing an event.

    Business Rules:
    - Only fields present in the payload change
    - Date ordering and historical bounds are checked on the merged values
    - A new region must exist
    - Supplied link lists replace the existing links
    - review_status is never touched here (see UpdateEventStatusUseCase)
    - updated_by is the acting user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, event_id: UUID, command: UpdateEventCommand, user_id: UUID
    ) -> Result[EventResponse]:
        changes = command.model_dump(exclude_unset=True, exclude=RELATION_FIELDS)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(
                    Error("EVENT_NOT_FOUND", f'Event with ID "{event_id}" not found')
                )

            start_date = changes.get("start_date") or event.start_date
            end_date = changes["end_date"] if "end_date" in changes else event.end_date
            date_error = check_event_dates(start_date, end_date)
            if date_error:
                return Return.err(date_error)

            person_ids = (
                [assignment.person_id for assignment in command.person_ids]
                if command.person_ids
                else None
            )
            reference_error = await check_references(
                self.uow,
                region_id=changes.get("region_id"),
                source_ids=command.source_ids,
                person_ids=person_ids,
                tag_ids=command.tag_ids,
            )
            if reference_error:
                return Return.err(reference_error)

            if "parties" in changes and command.parties is not None:
                changes["parties"] = command.parties.model_dump(exclude_none=True)

            for field, value in changes.items():
                # Required columns cannot be cleared by sending null
                if value is None and field in ("title", "type", "region_id", "start_date", "description"):
                    continue
                setattr(event, field, value)

            event.updated_by_id = user_id
            event.updated_at = utcnow()
            await self.uow.events.update(event)

            if command.source_ids is not None:
                await self.uow.events.replace_sources(
                    event.id, [SourceLink(source_id=i) for i in dict.fromkeys(command.source_ids)]
                )
            if command.person_ids is not None:
                links = {a.person_id: PersonLink(a.person_id, a.role) for a in command.person_ids}
                await self.uow.events.replace_people(event.id, list(links.values()))
            if command.tag_ids is not None:
                await self.uow.events.replace_tags(event.id, list(dict.fromkeys(command.tag_ids)))

            await self.uow.commit()

            updated = await self.uow.events.get_with_relations(event.id)
            return Return.ok(EventResponse.from_entity(updated, detailed=True))
