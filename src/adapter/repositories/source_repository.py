from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, or_
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.event_filters import contains
from src.app.repositories.source_repository import ISourceRepository
from src.domain.entities import Event, EventSource, Source


class SourceRepository(ISourceRepository):
    """Source repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Source]:
        """Get all sources ordered by title"""
        stmt = select(Source).order_by(Source.title, Source.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, source_id: UUID) -> Optional[Source]:
        """Get source by ID"""
        stmt = select(Source).where(Source.id == source_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_events(self, source_id: UUID) -> Optional[Source]:
        """Get source by ID with the citing events and their regions loaded"""
        stmt = (
            select(Source)
            .where(Source.id == source_id)
            .options(
                selectinload(Source.events)
                .selectinload(EventSource.event)
                .selectinload(Event.region)
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, source_ids: Sequence[UUID]) -> List[Source]:
        """Get all existing sources among the given IDs"""
        if not source_ids:
            return []
        stmt = select(Source).where(Source.id.in_(list(source_ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search(self, text: str, limit: int = 20) -> List[Source]:
        """Case-insensitive match on title or author"""
        stmt = (
            select(Source)
            .where(or_(contains(Source.title, text), contains(Source.author, text)))
            .order_by(Source.title, Source.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def citation_counts(self) -> Dict[UUID, int]:
        """Count citing events per source"""
        stmt = select(EventSource.source_id, func.count()).group_by(EventSource.source_id)
        result = await self.session.execute(stmt)
        return {source_id: total for source_id, total in result.all()}

    async def create(self, source: Source) -> Source:
        """Create a new source"""
        self.session.add(source)
        await self.session.flush()
        await self.session.refresh(source)
        return source

    async def update(self, source: Source) -> Source:
        """Update existing source"""
        self.session.add(source)
        await self.session.flush()
        await self.session.refresh(source)
        return source

    async def delete(self, source: Source) -> None:
        """Delete a source"""
        await self.session.execute(delete(Source).where(Source.id == source.id))
        await self.session.flush()
