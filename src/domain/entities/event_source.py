"""
EventSource Entity

Citation of a Source by an Event.
"""

from typing import Optional, TYPE_CHECKING
from uuid import UUID

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .event import Event
    from .source import Source


class EventSource(SQLModel, table=True):
    """
    EventSource join entity - (event_id, source_id) is unique.

    page_range annotates where in the source the event is discussed.
    """

    __tablename__ = "event_sources"

    event_id: UUID = Field(foreign_key="events.id", primary_key=True)
    source_id: UUID = Field(foreign_key="sources.id", primary_key=True, index=True)
    page_range: Optional[str] = Field(default=None, max_length=100)

    # Relationships
    event: "Event" = Relationship(back_populates="sources")
    source: "Source" = Relationship(back_populates="events")
