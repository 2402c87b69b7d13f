"""
User Management Use Cases

All user-related business logic.
"""

from .user_use_cases import (
    ListUsersUseCase,
    GetUserUseCase,
    CreateUserUseCase,
    DeactivateUserUseCase,
)
from .change_role_use_case import ChangeRoleUseCase
from .dtos import CreateUserCommand, ChangeRoleCommand

__all__ = [
    # Use Cases
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "ChangeRoleUseCase",
    "DeactivateUserUseCase",
    # DTOs
    "CreateUserCommand",
    "ChangeRoleCommand",
]
