"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .load_profile_use_case import LoadProfileUseCase
from .dtos import LoginResponse

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LoadProfileUseCase",
    # DTOs - Responses
    "LoginResponse",
]
