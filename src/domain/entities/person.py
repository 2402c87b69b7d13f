"""
Person Entity

Historical figure linked to events through EventPerson.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utcnow

if TYPE_CHECKING:
    from .event_person import EventPerson


class Person(SQLModel, table=True):
    """
    Person entity - a historical figure.

    Business Rules:
    - death_year >= birth_year when both are known
    - external_id identifies the same person across bulk imports
    """

    __tablename__ = "people"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    external_id: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=100
    )

    name_ar: str = Field(max_length=255, index=True)
    name_en: Optional[str] = Field(default=None, max_length=255)
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    bio: Optional[str] = None
    role: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    events: list["EventPerson"] = Relationship(back_populates="person")
