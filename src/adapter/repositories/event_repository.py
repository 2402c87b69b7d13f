from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import delete, func
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.event_filters import build_conditions, build_order_by
from src.app.repositories.event_repository import (
    EventQuery,
    IEventRepository,
    PersonLink,
    SourceLink,
)
from src.domain.entities import (
    Event,
    EventPerson,
    EventSource,
    EventTag,
    EventType,
    Region,
    ReviewStatus,
)


def _list_options():
    return [
        selectinload(Event.region),
        selectinload(Event.people).selectinload(EventPerson.person),
        selectinload(Event.sources).selectinload(EventSource.source),
        selectinload(Event.created_by),
    ]


def _detail_options():
    return _list_options() + [
        selectinload(Event.tags).selectinload(EventTag.tag),
        selectinload(Event.updated_by),
    ]


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, query: EventQuery) -> Tuple[List[Event], int]:
        """Count and page fetch share one predicate and one session"""
        conditions = build_conditions(query)

        count_stmt = select(func.count()).select_from(Event).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(Event)
            .where(*conditions)
            .order_by(*build_order_by(query))
            .offset(query.skip)
            .limit(query.limit)
            .options(*_list_options())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID (scalar fields only)"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_relations(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID with every relation loaded, refreshing cached state"""
        stmt = (
            select(Event)
            .where(Event.id == event_id)
            .options(*_detail_options())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_region_code(self, region_code: str) -> List[Event]:
        stmt = (
            select(Event)
            .join(Region, Region.id == Event.region_id)
            .where(Region.code == region_code)
            .order_by(Event.start_date.asc(), Event.id.asc())
            .options(*_list_options())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, event: Event) -> Event:
        """Create a new event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: Event) -> Event:
        """Update existing event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def delete(self, event_id: UUID) -> None:
        """Join rows first, then the event itself"""
        for model in (EventSource, EventPerson, EventTag):
            await self.session.execute(delete(model).where(model.event_id == event_id))
        await self.session.execute(delete(Event).where(Event.id == event_id))
        await self.session.flush()

    async def replace_sources(self, event_id: UUID, links: Sequence[SourceLink]) -> None:
        await self.session.execute(delete(EventSource).where(EventSource.event_id == event_id))
        for link in links:
            self.session.add(
                EventSource(event_id=event_id, source_id=link.source_id, page_range=link.page_range)
            )
        await self.session.flush()

    async def replace_people(self, event_id: UUID, links: Sequence[PersonLink]) -> None:
        await self.session.execute(delete(EventPerson).where(EventPerson.event_id == event_id))
        for link in links:
            self.session.add(
                EventPerson(event_id=event_id, person_id=link.person_id, role=link.role)
            )
        await self.session.flush()

    async def replace_tags(self, event_id: UUID, tag_ids: Sequence[UUID]) -> None:
        await self.session.execute(delete(EventTag).where(EventTag.event_id == event_id))
        for tag_id in tag_ids:
            self.session.add(EventTag(event_id=event_id, tag_id=tag_id))
        await self.session.flush()

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Event)
        return (await self.session.execute(stmt)).scalar_one()

    async def count_by_type(self) -> Dict[EventType, int]:
        stmt = select(Event.type, func.count()).group_by(Event.type)
        result = await self.session.execute(stmt)
        return {EventType(event_type): total for event_type, total in result.all()}

    async def count_by_status(self) -> Dict[ReviewStatus, int]:
        stmt = select(Event.review_status, func.count()).group_by(Event.review_status)
        result = await self.session.execute(stmt)
        return {ReviewStatus(status): total for status, total in result.all()}

    async def count_regions_with_events(self) -> int:
        stmt = select(func.count(func.distinct(Event.region_id)))
        return (await self.session.execute(stmt)).scalar_one()
