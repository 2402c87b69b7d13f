"""
Audit Use Case DTOs
"""

from datetime import datetime
from typing import Any, Optional

from src.app.use_cases.dtos import CamelModel, UserSummary
from src.domain.entities import AuditAction, AuditLog


class AuditLogResponse(CamelModel):
    """One audit log entry"""

    id: str
    user_id: str
    user: Optional[UserSummary] = None
    entity_type: str
    entity_id: str
    action: AuditAction
    old_data: Optional[Any] = None
    new_data: Optional[Any] = None
    ip_address: Optional[str] = None
    timestamp: datetime

    @classmethod
    def from_entity(cls, entry: AuditLog, user: Optional[UserSummary] = None) -> "AuditLogResponse":
        return cls(
            id=str(entry.id),
            user_id=str(entry.user_id),
            user=user,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            action=entry.action,
            old_data=entry.old_data,
            new_data=entry.new_data,
            ip_address=entry.ip_address,
            timestamp=entry.timestamp,
        )
