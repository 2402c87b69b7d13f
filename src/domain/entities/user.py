"""
User Entity

An authenticated principal who can view or edit the atlas.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - an authenticated principal.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash, never serialized to clients
    - Role hierarchy is VIEWER < EDITOR < ADMIN
    - Inactive users cannot log in (soft-disable, never deleted)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    name: str = Field(max_length=255)

    role: UserRole = Field(default=UserRole.VIEWER)
    active: bool = Field(default=True)

    # Timestamps
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role", "role"),)
