"""
People Use Cases

Historical figures that events can be linked to.
"""

from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse, PersonResponse
from src.domain.entities import Person
from .dtos import CreatePersonCommand, UpdatePersonCommand


def _not_found(person_id: UUID) -> Error:
    return Error("PERSON_NOT_FOUND", f'Person with ID "{person_id}" not found')


def _check_lifespan(birth_year: Optional[int], death_year: Optional[int]) -> Optional[Error]:
    if birth_year is not None and death_year is not None and death_year < birth_year:
        return Error(
            "INVALID_LIFESPAN",
            "Death year must not precede birth year",
            {"birthYear": birth_year, "deathYear": death_year},
        )
    return None


class ListPeopleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[PersonResponse]]:
        async with self.uow:
            people = await self.uow.people.list()
            return Return.ok([PersonResponse.from_entity(p) for p in people])


class GetPersonUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, person_id: UUID) -> Result[PersonResponse]:
        async with self.uow:
            person = await self.uow.people.get_by_id(person_id)
            if person is None:
                return Return.err(_not_found(person_id))
            return Return.ok(PersonResponse.from_entity(person))


class CreatePersonUseCase:
    """
    Use case for adding a person.

    Business Rules:
    - death_year >= birth_year when both are given
    - external_id, when given, must not already be taken
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreatePersonCommand) -> Result[PersonResponse]:
        lifespan_error = _check_lifespan(command.birth_year, command.death_year)
        if lifespan_error:
            return Return.err(lifespan_error)

        async with self.uow:
            if command.external_id:
                existing = await self.uow.people.get_by_external_id(command.external_id)
                if existing:
                    return Return.err(
                        Error(
                            "PERSON_ALREADY_EXISTS",
                            f'Person with external ID "{command.external_id}" already exists',
                        )
                    )

            person = await self.uow.people.create(Person(**command.model_dump()))
            await self.uow.commit()

            return Return.ok(PersonResponse.from_entity(person))


class UpdatePersonUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, person_id: UUID, command: UpdatePersonCommand
    ) -> Result[PersonResponse]:
        async with self.uow:
            person = await self.uow.people.get_by_id(person_id)
            if person is None:
                return Return.err(_not_found(person_id))

            changes = command.model_dump(exclude_unset=True)
            lifespan_error = _check_lifespan(
                changes.get("birth_year", person.birth_year),
                changes.get("death_year", person.death_year),
            )
            if lifespan_error:
                return Return.err(lifespan_error)

            for field, value in changes.items():
                if value is None and field == "name_ar":
                    continue
                setattr(person, field, value)

            person = await self.uow.people.update(person)
            await self.uow.commit()

            return Return.ok(PersonResponse.from_entity(person))


class DeletePersonUseCase:
    """Removes the person and their event links; the events stay"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, person_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            person = await self.uow.people.get_by_id(person_id)
            if person is None:
                return Return.err(_not_found(person_id))

            await self.uow.people.delete(person_id)
            await self.uow.commit()

            return Return.ok(
                MessageResponse(id=str(person_id), message="Person deleted successfully")
            )
