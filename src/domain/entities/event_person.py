"""
EventPerson Entity

Participation of a Person in an Event.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .event import Event
    from .person import Person


class EventPerson(SQLModel, table=True):
    """
    EventPerson join entity - (event_id, person_id) is unique.

    role describes the part the person played (leader, participant...).
    """

    __tablename__ = "event_people"

    event_id: UUID = Field(foreign_key="events.id", primary_key=True)
    person_id: UUID = Field(foreign_key="people.id", primary_key=True, index=True)
    role: str = Field(max_length=255)

    # Relationships
    event: "Event" = Relationship(back_populates="people")
    person: "Person" = Relationship(back_populates="events")
