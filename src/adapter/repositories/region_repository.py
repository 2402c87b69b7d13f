from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.region_repository import IRegionRepository
from src.domain.entities import Event, Region


class RegionRepository(IRegionRepository):
    """Region repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Region]:
        """Get all regions ordered by code"""
        stmt = select(Region).order_by(Region.code)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_with_geometry(self) -> List[Region]:
        """Get regions that have a boundary geometry"""
        stmt = select(Region).where(Region.geometry.is_not(None)).order_by(Region.code)
        result = await self.session.execute(stmt)
        # JSON null is stored as the string 'null' on some backends
        return [region for region in result.scalars().all() if region.geometry]

    async def get_by_id(self, region_id: UUID) -> Optional[Region]:
        """Get region by opaque ID"""
        stmt = select(Region).where(Region.id == region_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Optional[Region]:
        """Get region by its external code"""
        stmt = select(Region).where(Region.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def event_counts(self) -> Dict[UUID, int]:
        """Count events per region, computed live from the events table"""
        stmt = select(Event.region_id, func.count()).group_by(Event.region_id)
        result = await self.session.execute(stmt)
        return {region_id: total for region_id, total in result.all()}

    async def create(self, region: Region) -> Region:
        """Create a new region"""
        self.session.add(region)
        await self.session.flush()
        await self.session.refresh(region)
        return region

    async def update(self, region: Region) -> Region:
        """Update existing region"""
        self.session.add(region)
        await self.session.flush()
        await self.session.refresh(region)
        return region
