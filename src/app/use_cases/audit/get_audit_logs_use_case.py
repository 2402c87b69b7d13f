"""
Get Audit Logs Use Cases

Read-only views over the audit log for administrators.
"""

from typing import Dict, List
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import UserSummary
from src.domain.entities import AuditLog
from .dtos import AuditLogResponse


async def _with_users(uow: UnitOfWork, entries: List[AuditLog]) -> List[AuditLogResponse]:
    users: Dict[UUID, UserSummary] = {}
    responses = []
    for entry in entries:
        if entry.user_id not in users:
            user = await uow.users.get_by_id(entry.user_id)
            users[entry.user_id] = UserSummary.from_entity(user) if user else None
        responses.append(AuditLogResponse.from_entity(entry, users[entry.user_id]))
    return responses


class GetRecentAuditLogsUseCase:
    """Most recent audit entries, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = 100) -> Result[List[AuditLogResponse]]:
        async with self.uow:
            entries = await self.uow.audit_logs.get_recent(limit)
            return Return.ok(await _with_users(self.uow, entries))


class GetEntityAuditLogsUseCase:
    """Full history of one entity, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, entity_type: str, entity_id: str) -> Result[List[AuditLogResponse]]:
        async with self.uow:
            entries = await self.uow.audit_logs.get_by_entity(entity_type, entity_id)
            return Return.ok(await _with_users(self.uow, entries))


class GetUserAuditLogsUseCase:
    """Entries recorded for one user, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, limit: int = 50) -> Result[List[AuditLogResponse]]:
        async with self.uow:
            entries = await self.uow.audit_logs.get_by_user(user_id, limit)
            return Return.ok([AuditLogResponse.from_entity(entry) for entry in entries])
