from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from src.domain.entities import Tag


class ITagRepository(ABC):
    """Tag repository interface - application layer"""

    @abstractmethod
    async def list(self) -> List[Tag]:
        """Get all tags ordered by name"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Tag]:
        """Get tag by name"""
        pass

    @abstractmethod
    async def get_many(self, tag_ids: Sequence[UUID]) -> List[Tag]:
        """Get all existing tags among the given IDs"""
        pass

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        """Create a new tag"""
        pass
