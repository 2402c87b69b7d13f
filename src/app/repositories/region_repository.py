from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from src.domain.entities import Region


class IRegionRepository(ABC):
    """Region repository interface - application layer"""

    @abstractmethod
    async def list(self) -> List[Region]:
        """Get all regions ordered by code"""
        pass

    @abstractmethod
    async def list_with_geometry(self) -> List[Region]:
        """Get regions that have a boundary geometry"""
        pass

    @abstractmethod
    async def get_by_id(self, region_id: UUID) -> Optional[Region]:
        """Get region by opaque ID"""
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Region]:
        """Get region by its external code"""
        pass

    @abstractmethod
    async def event_counts(self) -> Dict[UUID, int]:
        """Count events per region, computed live from the events table"""
        pass

    @abstractmethod
    async def create(self, region: Region) -> Region:
        """Create a new region"""
        pass

    @abstractmethod
    async def update(self, region: Region) -> Region:
        """Update existing region"""
        pass
