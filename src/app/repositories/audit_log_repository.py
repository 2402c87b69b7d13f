from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AuditLog


class IAuditLogRepository(ABC):
    """
    AuditLog repository interface - application layer

    Append-only: there is no update or delete.
    """

    @abstractmethod
    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Create a new audit log entry (immutable)"""
        pass

    @abstractmethod
    async def get_recent(self, limit: int = 100) -> List[AuditLog]:
        """Get the most recent entries, newest first"""
        pass

    @abstractmethod
    async def get_by_entity(self, entity_type: str, entity_id: str) -> List[AuditLog]:
        """Get all entries for one entity, newest first"""
        pass

    @abstractmethod
    async def get_by_user(self, user_id: UUID, limit: int = 50) -> List[AuditLog]:
        """Get entries recorded for one user, newest first"""
        pass
