"""
Source API Routes
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse, SourceResponse
from src.app.use_cases.sources import (
    CreateSourceCommand,
    CreateSourceUseCase,
    DeleteSourceUseCase,
    GetSourceUseCase,
    ListSourcesUseCase,
    SearchSourcesUseCase,
    SourceDetailResponse,
    UpdateSourceCommand,
    UpdateSourceUseCase,
)
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/sources",
    tags=["Sources"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SourceResponse])
async def list_sources(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All sources ordered by title, with citation counts"""
    result = await ListSourcesUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/search", status_code=status.HTTP_200_OK, response_model=List[SourceResponse])
async def search_sources(
    q: str = Query(..., min_length=1, max_length=200),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Case-insensitive search on title or author (max 20 results)"""
    result = await SearchSourcesUseCase(uow).execute(q)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{id}", status_code=status.HTTP_200_OK, response_model=SourceDetailResponse)
async def get_source(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Source with the events citing it

    Raises:
        - 404 Not Found: SOURCE_NOT_FOUND
    """
    result = await GetSourceUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "SOURCE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SourceResponse)
async def create_source(
    request: CreateSourceCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Source (EDITOR or above)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 422 Unprocessable Entity: Invalid payload
    """
    result = await CreateSourceUseCase(uow).execute(request)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.put("/{id}", status_code=status.HTTP_200_OK, response_model=SourceResponse)
async def update_source(
    id: UUID, request: UpdateSourceCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Update Source (EDITOR or above)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: SOURCE_NOT_FOUND
    """
    result = await UpdateSourceUseCase(uow).execute(id, request)
    if result.is_err():
        error = result.error
        if error.code == "SOURCE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.delete("/{id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_source(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Source (ADMIN)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: SOURCE_NOT_FOUND
        - 409 Conflict: SOURCE_IN_USE (still cited by events)
    """
    result = await DeleteSourceUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "SOURCE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "SOURCE_IN_USE":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)
    return result.value
