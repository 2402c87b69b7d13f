"""
Tag Entity

Free-form label attached to events.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Tag(SQLModel, table=True):
    """Tag entity - unique label"""

    __tablename__ = "tags"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100)
