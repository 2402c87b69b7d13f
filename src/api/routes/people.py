"""
People API Routes
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse, PersonResponse
from src.app.use_cases.people import (
    CreatePersonCommand,
    CreatePersonUseCase,
    DeletePersonUseCase,
    GetPersonUseCase,
    ListPeopleUseCase,
    UpdatePersonCommand,
    UpdatePersonUseCase,
)
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/people",
    tags=["People"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[PersonResponse])
async def list_people(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListPeopleUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{id}", status_code=status.HTTP_200_OK, response_model=PersonResponse)
async def get_person(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetPersonUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "PERSON_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PersonResponse)
async def create_person(
    request: CreatePersonCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Person (EDITOR or above)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 409 Conflict: PERSON_ALREADY_EXISTS (external id taken)
        - 422 Unprocessable Entity: INVALID_LIFESPAN or invalid payload
    """
    result = await CreatePersonUseCase(uow).execute(request)
    if result.is_err():
        error = result.error
        if error.code == "INVALID_LIFESPAN":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "PERSON_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)
    return result.value


@router.put("/{id}", status_code=status.HTTP_200_OK, response_model=PersonResponse)
async def update_person(
    id: UUID, request: UpdatePersonCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Update Person (EDITOR or above)

    Raises:
        - 404 Not Found: PERSON_NOT_FOUND
        - 422 Unprocessable Entity: INVALID_LIFESPAN
    """
    result = await UpdatePersonUseCase(uow).execute(id, request)
    if result.is_err():
        error = result.error
        if error.code == "PERSON_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVALID_LIFESPAN":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)
    return result.value


@router.delete("/{id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_person(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Person (ADMIN)

    Event links are removed; the events themselves are kept.
    """
    result = await DeletePersonUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "PERSON_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value
