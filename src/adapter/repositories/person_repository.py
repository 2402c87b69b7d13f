from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.person_repository import IPersonRepository
from src.domain.entities import EventPerson, Person


class PersonRepository(IPersonRepository):
    """Person repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Person]:
        """Get all people ordered by Arabic name"""
        stmt = select(Person).order_by(Person.name_ar, Person.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, person_id: UUID) -> Optional[Person]:
        """Get person by ID"""
        stmt = select(Person).where(Person.id == person_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_external_id(self, external_id: str) -> Optional[Person]:
        """Get person by the identifier used in bulk imports"""
        stmt = select(Person).where(Person.external_id == external_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, person_ids: Sequence[UUID]) -> List[Person]:
        """Get all existing people among the given IDs"""
        if not person_ids:
            return []
        stmt = select(Person).where(Person.id.in_(list(person_ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, person: Person) -> Person:
        """Create a new person"""
        self.session.add(person)
        await self.session.flush()
        await self.session.refresh(person)
        return person

    async def update(self, person: Person) -> Person:
        """Update existing person"""
        self.session.add(person)
        await self.session.flush()
        await self.session.refresh(person)
        return person

    async def delete(self, person_id: UUID) -> None:
        """Delete a person and their event links"""
        await self.session.execute(delete(EventPerson).where(EventPerson.person_id == person_id))
        await self.session.execute(delete(Person).where(Person.id == person_id))
        await self.session.flush()
