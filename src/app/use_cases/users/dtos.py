"""
User Management DTOs
"""

from typing import Optional

from pydantic import EmailStr, Field

from src.app.use_cases.dtos import CamelModel
from src.domain.entities import UserRole


class CreateUserCommand(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)  # bcrypt input limit
    name: str = Field(..., min_length=1, max_length=255)
    role: Optional[UserRole] = None


class ChangeRoleCommand(CamelModel):
    role: UserRole
