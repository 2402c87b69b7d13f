"""
Tag Use Cases
"""

from typing import List

from pydantic import Field

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import CamelModel, TagResponse
from src.domain.entities import Tag


class CreateTagCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)


class ListTagsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[TagResponse]]:
        async with self.uow:
            tags = await self.uow.tags.list()
            return Return.ok([TagResponse.from_entity(tag) for tag in tags])


class CreateTagUseCase:
    """Tag names are unique (compared after trimming whitespace)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTagCommand) -> Result[TagResponse]:
        name = command.name.strip()
        if not name:
            return Return.err(Error("VALIDATION_ERROR", "Tag name must not be blank"))

        async with self.uow:
            if await self.uow.tags.get_by_name(name):
                return Return.err(
                    Error("TAG_ALREADY_EXISTS", f'Tag "{name}" already exists')
                )

            tag = await self.uow.tags.create(Tag(name=name))
            await self.uow.commit()

            return Return.ok(TagResponse.from_entity(tag))
