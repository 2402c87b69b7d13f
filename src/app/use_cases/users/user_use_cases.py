"""
User Management Use Cases

Administrative operations over editorial accounts.
"""

from typing import List
from uuid import UUID

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import UserResponse
from src.domain.entities import User, UserRole
from .dtos import CreateUserCommand


def _not_found(user_id: UUID) -> Error:
    return Error("USER_NOT_FOUND", f'User with ID "{user_id}" not found')


class ListUsersUseCase:
    """All users, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserResponse]]:
        async with self.uow:
            users = await self.uow.users.list()
            return Return.ok([UserResponse.from_entity(u) for u in users])


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(_not_found(user_id))
            return Return.ok(UserResponse.from_entity(user))


class CreateUserUseCase:
    """
    Use case for creating an account.

    Business Rules:
    - Email must be unique (case-insensitive, stored lowercased)
    - Role defaults to VIEWER
    - Password stored only as a bcrypt hash
    """

    def __init__(self, uow: UnitOfWork, bcrypt_rounds: int = 12):
        self.uow = uow
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, command: CreateUserCommand) -> Result[UserResponse]:
        email = command.email.lower()

        async with self.uow:
            existing = await self.uow.users.get_by_email(email)
            if existing:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already exists"))

            password_hash = bcrypt.hashpw(
                command.password.encode(), bcrypt.gensalt(self.bcrypt_rounds)
            )

            user = User(
                email=email,
                password_hash=password_hash.decode(),
                name=command.name,
                role=command.role or UserRole.VIEWER,
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

            return Return.ok(UserResponse.from_entity(user))


class DeactivateUserUseCase:
    """
    Soft-disables an account.

    Deactivated users can no longer log in, and tokens they already hold stop
    resolving to a principal.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(_not_found(user_id))

            user.active = False
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserResponse.from_entity(user))
