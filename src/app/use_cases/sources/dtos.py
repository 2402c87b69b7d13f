"""
Source Use Case DTOs
"""

from datetime import date
from typing import List, Optional

from pydantic import Field, HttpUrl

from src.app.use_cases.dtos import CamelModel, SourceResponse
from src.domain.entities import EventType, Source, SourceType


class CreateSourceCommand(CamelModel):
    title: str = Field(..., min_length=1, max_length=500)
    author: Optional[str] = Field(None, max_length=255)
    year: Optional[int] = Field(None, ge=1500, le=2030)
    publisher: Optional[str] = Field(None, max_length=255)
    type: SourceType
    url: Optional[HttpUrl] = None
    isbn: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = Field(None, max_length=2000)


class UpdateSourceCommand(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    author: Optional[str] = Field(None, max_length=255)
    year: Optional[int] = Field(None, ge=1500, le=2030)
    publisher: Optional[str] = Field(None, max_length=255)
    type: Optional[SourceType] = None
    url: Optional[HttpUrl] = None
    isbn: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = Field(None, max_length=2000)


class CitingEvent(CamelModel):
    id: str
    title: str
    type: EventType
    start_date: date
    page_range: Optional[str] = None


class SourceDetailResponse(SourceResponse):
    """Source with the events that cite it"""

    events: List[CitingEvent] = []

    @classmethod
    def from_source(cls, source: Source) -> "SourceDetailResponse":
        base = SourceResponse.from_entity(source, event_count=len(source.events))
        return cls(
            **base.model_dump(),
            events=[
                CitingEvent(
                    id=str(link.event.id),
                    title=link.event.title,
                    type=link.event.type,
                    start_date=link.event.start_date,
                    page_range=link.page_range,
                )
                for link in source.events
            ],
        )
