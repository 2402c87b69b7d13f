"""
Record Audit Log Use Case

Persists one immutable audit entry for a mutating request.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditLog


class RecordAuditLogCommand(BaseModel):
    """What happened, to which entity, by whom"""

    user_id: UUID
    entity_type: str
    entity_id: str
    action: AuditAction
    old_data: Optional[Any] = None
    new_data: Optional[Any] = None
    ip_address: Optional[str] = None


class RecordAuditLogUseCase:
    """
    Use case for appending to the audit log.

    Business Rules:
    - Entries are never updated or deleted
    - Runs in its own transaction, independent of the audited request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RecordAuditLogCommand) -> Result[AuditLog]:
        async with self.uow:
            if not command.entity_type:
                return Return.err(Error("INVALID_AUDIT_ENTRY", "Entity type is required"))

            audit_log = AuditLog(
                user_id=command.user_id,
                entity_type=command.entity_type,
                entity_id=command.entity_id or "unknown",
                action=command.action,
                old_data=command.old_data,
                new_data=command.new_data,
                ip_address=command.ip_address,
            )
            audit_log = await self.uow.audit_logs.create(audit_log)
            await self.uow.commit()

            return Return.ok(audit_log)
