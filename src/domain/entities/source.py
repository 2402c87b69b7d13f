"""
Source Entity

Citation (book, article, archive...) backing one or more events.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utcnow
from .enums import SourceType

if TYPE_CHECKING:
    from .event_source import EventSource


class Source(SQLModel, table=True):
    """
    Source entity - a citation linked to events through EventSource.

    Business Rules:
    - Created independently of events
    - Cannot be deleted while events still cite it
    """

    __tablename__ = "sources"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=500, index=True)
    author: Optional[str] = Field(default=None, max_length=255)
    year: Optional[int] = None
    publisher: Optional[str] = Field(default=None, max_length=255)

    type: SourceType = Field(default=SourceType.BOOK)

    url: Optional[str] = Field(default=None, max_length=1000)
    isbn: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = Field(default=None, max_length=2000)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    events: list["EventSource"] = Relationship(back_populates="source")
