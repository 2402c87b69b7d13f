"""
User Management API Routes

Every endpoint requires the ADMIN role.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import UserResponse
from src.app.use_cases.users import (
    ChangeRoleCommand,
    ChangeRoleUseCase,
    CreateUserCommand,
    CreateUserUseCase,
    DeactivateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[UserResponse])
async def list_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All users, newest first"""
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetUserUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(request: CreateUserCommand, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Create User

    Role defaults to VIEWER.

    Raises:
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: Invalid input
    """
    use_case = CreateUserUseCase(uow, bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS)
    result = await use_case.execute(request)
    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)
    return result.value


@router.patch("/{id}/role", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def change_role(
    id: UUID,
    request: ChangeRoleCommand,
    principal: Principal = Depends(authorize),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change User Role

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: CANNOT_DEMOTE_SELF
    """
    result = await ChangeRoleUseCase(uow).execute(principal.id, id, request.role)
    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "CANNOT_DEMOTE_SELF":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)
    return result.value


@router.patch("/{id}/deactivate", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def deactivate_user(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Deactivate User

    The account is kept but can no longer log in or use issued tokens.

    Raises:
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await DeactivateUserUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value
