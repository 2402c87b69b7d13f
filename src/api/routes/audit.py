"""
Audit API Routes

Read-only access to the audit log for administrators.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    AuditLogResponse,
    GetEntityAuditLogsUseCase,
    GetRecentAuditLogsUseCase,
    GetUserAuditLogsUseCase,
)
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/audit",
    tags=["Audit"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AuditLogResponse])
async def get_recent(
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of entries"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Recent Audit Log Entries

    Returns:
        - Entries ordered by newest first, with the acting user

    Raises:
        - 401 Unauthorized / 403 Forbidden (ADMIN only)
    """
    result = await GetRecentAuditLogsUseCase(uow).execute(limit)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get(
    "/entity/{entity_type}/{entity_id}",
    status_code=status.HTTP_200_OK,
    response_model=List[AuditLogResponse],
)
async def get_entity_history(
    entity_type: str, entity_id: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Full history of one entity, newest first"""
    result = await GetEntityAuditLogsUseCase(uow).execute(entity_type, entity_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/user/{user_id}", status_code=status.HTTP_200_OK, response_model=List[AuditLogResponse])
async def get_user_history(
    user_id: UUID,
    limit: int = Query(50, ge=1, le=1000),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Entries recorded for one user, newest first"""
    result = await GetUserAuditLogsUseCase(uow).execute(user_id, limit)
    if result.is_err():
        raise ServerError(result.error)
    return result.value
