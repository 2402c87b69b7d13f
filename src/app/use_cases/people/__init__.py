"""
People Use Cases

All person-related business logic.
"""

from .person_use_cases import (
    ListPeopleUseCase,
    GetPersonUseCase,
    CreatePersonUseCase,
    UpdatePersonUseCase,
    DeletePersonUseCase,
)
from .dtos import CreatePersonCommand, UpdatePersonCommand

__all__ = [
    # Use Cases
    "ListPeopleUseCase",
    "GetPersonUseCase",
    "CreatePersonUseCase",
    "UpdatePersonUseCase",
    "DeletePersonUseCase",
    # DTOs
    "CreatePersonCommand",
    "UpdatePersonCommand",
]
