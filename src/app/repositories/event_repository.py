from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from src.domain.entities import Event, EventType, ReviewStatus


# Public (camelCase) sort keys -> Event attribute names
EVENT_SORT_FIELDS = {
    "startDate": "start_date",
    "endDate": "end_date",
    "title": "title",
    "type": "type",
    "reviewStatus": "review_status",
    "casualtiesEstimated": "casualties_estimated",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


@dataclass(frozen=True)
class PersonLink:
    """Person assignment for an event, with the role played"""

    person_id: UUID
    role: str


@dataclass(frozen=True)
class SourceLink:
    """Source citation for an event"""

    source_id: UUID
    page_range: Optional[str] = None


@dataclass
class EventQuery:
    """
    Declarative filter + pagination criteria for listing events.

    region_code filters on Region.code (the external identifier), never on
    Region.id. Search is matched case-insensitively across several fields
    (OR); every other criterion narrows the result (AND).
    """

    page: int = 1
    limit: int = 20
    sort_by: str = "startDate"
    sort_order: str = "asc"
    search: Optional[str] = None
    region_code: Optional[str] = None
    types: List[EventType] = field(default_factory=list)
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    review_status: Optional[ReviewStatus] = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def list(self, query: EventQuery) -> Tuple[List[Event], int]:
        """
        Get one page of events matching the query.

        Returns:
            Tuple of (events on the page, total matching events)
        """
        pass

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID (scalar fields only)"""
        pass

    @abstractmethod
    async def get_with_relations(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID with region, people, sources, tags and users loaded"""
        pass

    @abstractmethod
    async def get_by_region_code(self, region_code: str) -> List[Event]:
        """Get all events of the region with the given code, oldest first"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Update existing event"""
        pass

    @abstractmethod
    async def delete(self, event_id: UUID) -> None:
        """Hard delete an event and its join rows"""
        pass

    @abstractmethod
    async def replace_sources(self, event_id: UUID, links: Sequence[SourceLink]) -> None:
        """Replace the source citations of an event"""
        pass

    @abstractmethod
    async def replace_people(self, event_id: UUID, links: Sequence[PersonLink]) -> None:
        """Replace the people linked to an event"""
        pass

    @abstractmethod
    async def replace_tags(self, event_id: UUID, tag_ids: Sequence[UUID]) -> None:
        """Replace the tags of an event"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all events"""
        pass

    @abstractmethod
    async def count_by_type(self) -> Dict[EventType, int]:
        """Count events grouped by type"""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[ReviewStatus, int]:
        """Count events grouped by review status"""
        pass

    @abstractmethod
    async def count_regions_with_events(self) -> int:
        """Count distinct regions referenced by at least one event"""
        pass
