"""
Source Use Cases

Catalogue of citations, managed independently of events.
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse, SourceResponse
from src.domain.entities import Source
from .dtos import CreateSourceCommand, SourceDetailResponse, UpdateSourceCommand

# Upper bound on search hits
SEARCH_LIMIT = 20


def _not_found(source_id: UUID) -> Error:
    return Error("SOURCE_NOT_FOUND", f'Source with ID "{source_id}" not found')


class ListSourcesUseCase:
    """All sources ordered by title, each with its citation count"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[SourceResponse]]:
        async with self.uow:
            sources = await self.uow.sources.list()
            counts = await self.uow.sources.citation_counts()
            return Return.ok(
                [SourceResponse.from_entity(s, counts.get(s.id, 0)) for s in sources]
            )


class GetSourceUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, source_id: UUID) -> Result[SourceDetailResponse]:
        async with self.uow:
            source = await self.uow.sources.get_with_events(source_id)
            if source is None:
                return Return.err(_not_found(source_id))
            return Return.ok(SourceDetailResponse.from_source(source))


class SearchSourcesUseCase:
    """Case-insensitive match on title or author, at most SEARCH_LIMIT hits"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, text: str) -> Result[List[SourceResponse]]:
        async with self.uow:
            sources = await self.uow.sources.search(text, limit=SEARCH_LIMIT)
            return Return.ok([SourceResponse.from_entity(s) for s in sources])


class CreateSourceUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateSourceCommand) -> Result[SourceResponse]:
        async with self.uow:
            fields = command.model_dump()
            fields["url"] = str(command.url) if command.url else None

            source = await self.uow.sources.create(Source(**fields))
            await self.uow.commit()

            return Return.ok(SourceResponse.from_entity(source, 0))


class UpdateSourceUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, source_id: UUID, command: UpdateSourceCommand
    ) -> Result[SourceResponse]:
        async with self.uow:
            source = await self.uow.sources.get_by_id(source_id)
            if source is None:
                return Return.err(_not_found(source_id))

            changes = command.model_dump(exclude_unset=True)
            if "url" in changes:
                changes["url"] = str(command.url) if command.url else None

            for field, value in changes.items():
                if value is None and field in ("title", "type"):
                    continue
                setattr(source, field, value)

            source = await self.uow.sources.update(source)
            await self.uow.commit()

            counts = await self.uow.sources.citation_counts()
            return Return.ok(SourceResponse.from_entity(source, counts.get(source.id, 0)))


class DeleteSourceUseCase:
    """
    Use case for removing a source.

    Business Rules:
    - Refused while any event still cites the source
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, source_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            source = await self.uow.sources.get_by_id(source_id)
            if source is None:
                return Return.err(_not_found(source_id))

            citations = (await self.uow.sources.citation_counts()).get(source_id, 0)
            if citations:
                return Return.err(
                    Error(
                        "SOURCE_IN_USE",
                        "Source is cited by events and cannot be deleted",
                        {"eventCount": citations},
                    )
                )

            await self.uow.sources.delete(source)
            await self.uow.commit()

            return Return.ok(
                MessageResponse(id=str(source_id), message="Source deleted successfully")
            )
