from typing import List, Optional, Sequence
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.tag_repository import ITagRepository
from src.domain.entities import Tag


class TagRepository(ITagRepository):
    """Tag repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Tag]:
        stmt = select(Tag).order_by(Tag.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_name(self, name: str) -> Optional[Tag]:
        stmt = select(Tag).where(Tag.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_many(self, tag_ids: Sequence[UUID]) -> List[Tag]:
        if not tag_ids:
            return []
        stmt = select(Tag).where(Tag.id.in_(list(tag_ids)))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, tag: Tag) -> Tag:
        self.session.add(tag)
        await self.session.flush()
        await self.session.refresh(tag)
        return tag
