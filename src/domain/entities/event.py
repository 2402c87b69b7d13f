"""
Event Entity

A historical occurrence placed on the map and the timeline.
"""

from datetime import date, datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utcnow
from .enums import EventType, ReviewStatus

if TYPE_CHECKING:
    from .event_person import EventPerson
    from .event_source import EventSource
    from .event_tag import EventTag
    from .region import Region
    from .user import User

# Historical bounds of the atlas (inclusive years)
MIN_EVENT_YEAR = 1830
MAX_EVENT_YEAR = 1954


class Event(SQLModel, table=True):
    """
    Event entity - a historical occurrence.

    Business Rules:
    - region_id must reference an existing Region
    - start_date year within MIN_EVENT_YEAR..MAX_EVENT_YEAR
    - end_date >= start_date when present
    - Created as DRAFT; review_status changes only through the status operation
    - Hard delete removes the join rows (sources, people, tags)
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=500)
    type: EventType = Field(nullable=False)

    region_id: UUID = Field(foreign_key="regions.id", nullable=False, index=True)

    start_date: date = Field(nullable=False)
    end_date: Optional[date] = None

    description: str
    detailed_description: Optional[str] = None

    # Opaque structured documents, shape-validated at the API boundary
    coordinates: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    parties: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    outcome: Optional[str] = None
    casualties_text: Optional[str] = Field(default=None, max_length=500)
    casualties_estimated: Optional[int] = None

    review_status: ReviewStatus = Field(default=ReviewStatus.DRAFT)

    created_by_id: Optional[UUID] = Field(default=None, foreign_key="users.id")
    updated_by_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    region: Optional["Region"] = Relationship(back_populates="events")
    sources: list["EventSource"] = Relationship(back_populates="event")
    people: list["EventPerson"] = Relationship(back_populates="event")
    tags: list["EventTag"] = Relationship(back_populates="event")
    created_by: Optional["User"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Event.created_by_id]"}
    )
    updated_by: Optional["User"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Event.updated_by_id]"}
    )

    __table_args__ = (
        Index("idx_event_start_date", "start_date"),
        Index("idx_event_type", "type"),
        Index("idx_event_review_status", "review_status"),
    )
