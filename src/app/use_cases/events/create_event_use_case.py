"""
Create Event Use Case

Creates a DRAFT event together with its source, person and tag links.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.event_repository import PersonLink, SourceLink
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Event, ReviewStatus
from .dtos import CreateEventCommand, EventResponse
from .validation import check_event_dates, check_references

RELATION_FIELDS = {"source_ids", "person_ids", "tag_ids"}


class CreateEventUseCase:
    """
    Use case for creating an event.

    Business Rules:
    - review_status is always DRAFT, whatever the caller sent
    - created_by is the acting user
    - Region and every linked source/person/tag must exist beforehand
    - Event and links are committed together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateEventCommand, user_id: UUID) -> Result[EventResponse]:
        """
        Execute create event use case.

        Args:
            command: Validated event payload
            user_id: Acting user

        Returns:
            Result with the fully expanded event, or Error
        """
        date_error = check_event_dates(command.start_date, command.end_date)
        if date_error:
            return Return.err(date_error)

        person_ids = [assignment.person_id for assignment in command.person_ids or []]

        async with self.uow:
            reference_error = await check_references(
                self.uow,
                region_id=command.region_id,
                source_ids=command.source_ids,
                person_ids=person_ids,
                tag_ids=command.tag_ids,
            )
            if reference_error:
                return Return.err(reference_error)

            fields = command.model_dump(exclude=RELATION_FIELDS | {"parties"})
            if command.parties is not None:
                fields["parties"] = command.parties.model_dump(exclude_none=True)

            event = Event(
                **fields,
                review_status=ReviewStatus.DRAFT,
                created_by_id=user_id,
            )
            event = await self.uow.events.create(event)

            if command.source_ids:
                await self.uow.events.replace_sources(
                    event.id, [SourceLink(source_id=i) for i in dict.fromkeys(command.source_ids)]
                )
            if command.person_ids:
                links = {a.person_id: PersonLink(a.person_id, a.role) for a in command.person_ids}
                await self.uow.events.replace_people(event.id, list(links.values()))
            if command.tag_ids:
                await self.uow.events.replace_tags(event.id, list(dict.fromkeys(command.tag_ids)))

            await self.uow.commit()

            created = await self.uow.events.get_with_relations(event.id)
            return Return.ok(EventResponse.from_entity(created, detailed=True))
