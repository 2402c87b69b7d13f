"""
AuditLog Entity

Immutable record of a mutating request against a resource.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow
from .enums import AuditAction


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - who did what to which entity.

    Business Rules:
    - Append-only (never updated or deleted by the application)
    - entity_id is "unknown" when it could not be determined
    - old_data holds the request body for updates, or the error and the
      attempted body for failed requests
    - new_data holds the response body, null on failure
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False)
    entity_type: str = Field(max_length=50)
    entity_id: str = Field(max_length=100)
    action: AuditAction = Field(nullable=False)

    old_data: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    new_data: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    ip_address: Optional[str] = Field(default=None, max_length=100)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_timestamp", "timestamp"),
        Index("idx_audit_entity", "entity_type", "entity_id"),
        Index("idx_audit_user_id", "user_id"),
    )
