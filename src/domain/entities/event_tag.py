from typing import TYPE_CHECKING
from uuid import UUID

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .event import Event
    from .tag import Tag


class EventTag(SQLModel, table=True):
    """EventTag join entity"""

    __tablename__ = "event_tags"

    event_id: UUID = Field(foreign_key="events.id", primary_key=True)
    tag_id: UUID = Field(foreign_key="tags.id", primary_key=True, index=True)

    # Relationships
    event: "Event" = Relationship(back_populates="tags")
    tag: "Tag" = Relationship()
