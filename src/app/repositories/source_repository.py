from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from src.domain.entities import Source


class ISourceRepository(ABC):
    """Source repository interface - application layer"""

    @abstractmethod
    async def list(self) -> List[Source]:
        """Get all sources ordered by title"""
        pass

    @abstractmethod
    async def get_by_id(self, source_id: UUID) -> Optional[Source]:
        """Get source by ID"""
        pass

    @abstractmethod
    async def get_with_events(self, source_id: UUID) -> Optional[Source]:
        """Get source by ID with the citing events loaded"""
        pass

    @abstractmethod
    async def get_many(self, source_ids: Sequence[UUID]) -> List[Source]:
        """Get all existing sources among the given IDs"""
        pass

    @abstractmethod
    async def search(self, text: str, limit: int = 20) -> List[Source]:
        """Case-insensitive match on title or author"""
        pass

    @abstractmethod
    async def citation_counts(self) -> Dict[UUID, int]:
        """Count citing events per source"""
        pass

    @abstractmethod
    async def create(self, source: Source) -> Source:
        """Create a new source"""
        pass

    @abstractmethod
    async def update(self, source: Source) -> Source:
        """Update existing source"""
        pass

    @abstractmethod
    async def delete(self, source: Source) -> None:
        """Delete a source"""
        pass
