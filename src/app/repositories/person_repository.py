from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from src.domain.entities import Person


class IPersonRepository(ABC):
    """Person repository interface - application layer"""

    @abstractmethod
    async def list(self) -> List[Person]:
        """Get all people ordered by Arabic name"""
        pass

    @abstractmethod
    async def get_by_id(self, person_id: UUID) -> Optional[Person]:
        """Get person by ID"""
        pass

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> Optional[Person]:
        """Get person by the identifier used in bulk imports"""
        pass

    @abstractmethod
    async def get_many(self, person_ids: Sequence[UUID]) -> List[Person]:
        """Get all existing people among the given IDs"""
        pass

    @abstractmethod
    async def create(self, person: Person) -> Person:
        """Create a new person"""
        pass

    @abstractmethod
    async def update(self, person: Person) -> Person:
        """Update existing person"""
        pass

    @abstractmethod
    async def delete(self, person_id: UUID) -> None:
        """Delete a person and their event links"""
        pass
