"""
Event Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the events domain.
Commands carry the field-level validation; cross-field rules (date ordering,
historical bounds, referenced rows existing) are checked by the use cases.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from src.app.use_cases.dtos import (
    CamelModel,
    RegionSummary,
    SourceResponse,
    TagResponse,
    UserSummary,
)
from src.domain.entities import Event, EventType, ReviewStatus


# ============================================================================
# Nested Models
# ============================================================================


class Coordinates(CamelModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Parties(CamelModel):
    """Belligerents grouped by side"""

    resistance: Optional[List[str]] = None
    colonial: Optional[List[str]] = None
    other: Optional[List[str]] = None


class PersonAssignment(CamelModel):
    person_id: UUID
    role: str = Field(..., min_length=1, max_length=255)


# ============================================================================
# Command DTOs
# ============================================================================


class CreateEventCommand(CamelModel):
    """
    Create event command

    reviewStatus is deliberately absent: new events always start as DRAFT.
    """

    title: str = Field(..., min_length=5, max_length=500)
    type: EventType
    region_id: UUID
    start_date: date
    end_date: Optional[date] = None
    description: str = Field(..., min_length=20, max_length=1000)
    detailed_description: Optional[str] = Field(None, max_length=10000)
    coordinates: Optional[Coordinates] = None
    outcome: Optional[str] = Field(None, max_length=2000)
    casualties_text: Optional[str] = Field(None, max_length=500)
    casualties_estimated: Optional[int] = Field(None, ge=0)
    parties: Optional[Parties] = None
    source_ids: Optional[List[UUID]] = None
    person_ids: Optional[List[PersonAssignment]] = None
    tag_ids: Optional[List[UUID]] = None


class UpdateEventCommand(CamelModel):
    """
    Partial update command - only fields present in the payload are applied.

    Supplied sourceIds/personIds/tagIds replace the existing links.
    """

    title: Optional[str] = Field(None, min_length=5, max_length=500)
    type: Optional[EventType] = None
    region_id: Optional[UUID] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = Field(None, min_length=20, max_length=1000)
    detailed_description: Optional[str] = Field(None, max_length=10000)
    coordinates: Optional[Coordinates] = None
    outcome: Optional[str] = Field(None, max_length=2000)
    casualties_text: Optional[str] = Field(None, max_length=500)
    casualties_estimated: Optional[int] = Field(None, ge=0)
    parties: Optional[Parties] = None
    source_ids: Optional[List[UUID]] = None
    person_ids: Optional[List[PersonAssignment]] = None
    tag_ids: Optional[List[UUID]] = None


class UpdateEventStatusCommand(CamelModel):
    status: ReviewStatus


# ============================================================================
# Response DTOs
# ============================================================================


class PersonBrief(CamelModel):
    id: str
    name_ar: str
    name_en: Optional[str] = None
    role: Optional[str] = None


class EventPersonResponse(CamelModel):
    """A person linked to an event, with the part they played in it"""

    person_id: str
    role: str
    person: PersonBrief


class EventSourceResponse(CamelModel):
    source_id: str
    page_range: Optional[str] = None
    source: SourceResponse


class EventResponse(CamelModel):
    """Event expanded with its region, people, sources and authors"""

    id: str
    title: str
    type: EventType
    region_id: str
    region: Optional[RegionSummary] = None
    start_date: date
    end_date: Optional[date] = None
    description: str
    detailed_description: Optional[str] = None
    coordinates: Optional[Dict[str, Any]] = None
    outcome: Optional[str] = None
    casualties_text: Optional[str] = None
    casualties_estimated: Optional[int] = None
    parties: Optional[Dict[str, Any]] = None
    review_status: ReviewStatus
    people: List[EventPersonResponse] = []
    sources: List[EventSourceResponse] = []
    tags: Optional[List[TagResponse]] = None
    created_by_id: Optional[str] = None
    updated_by_id: Optional[str] = None
    created_by: Optional[UserSummary] = None
    updated_by: Optional[UserSummary] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, event: Event, detailed: bool = False) -> "EventResponse":
        """
        Build from an Event whose relations were eagerly loaded.

        detailed additionally expands tags and the last editor.
        """
        return cls(
            id=str(event.id),
            title=event.title,
            type=event.type,
            region_id=str(event.region_id),
            region=RegionSummary.from_entity(event.region) if event.region else None,
            start_date=event.start_date,
            end_date=event.end_date,
            description=event.description,
            detailed_description=event.detailed_description,
            coordinates=event.coordinates,
            outcome=event.outcome,
            casualties_text=event.casualties_text,
            casualties_estimated=event.casualties_estimated,
            parties=event.parties,
            review_status=event.review_status,
            people=[
                EventPersonResponse(
                    person_id=str(link.person_id),
                    role=link.role,
                    person=PersonBrief(
                        id=str(link.person.id),
                        name_ar=link.person.name_ar,
                        name_en=link.person.name_en,
                        role=link.person.role,
                    ),
                )
                for link in event.people
            ],
            sources=[
                EventSourceResponse(
                    source_id=str(link.source_id),
                    page_range=link.page_range,
                    source=SourceResponse.from_entity(link.source),
                )
                for link in event.sources
            ],
            tags=[TagResponse.from_entity(link.tag) for link in event.tags] if detailed else None,
            created_by_id=str(event.created_by_id) if event.created_by_id else None,
            updated_by_id=str(event.updated_by_id) if event.updated_by_id else None,
            created_by=UserSummary.from_entity(event.created_by) if event.created_by else None,
            updated_by=(
                UserSummary.from_entity(event.updated_by)
                if detailed and event.updated_by
                else None
            ),
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventListResponse(CamelModel):
    """One page of events plus pagination metadata"""

    data: List[EventResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class TypeCount(CamelModel):
    type: EventType
    count: int


class StatusCount(CamelModel):
    status: ReviewStatus
    count: int


class EventStatisticsResponse(CamelModel):
    total: int
    by_type: List[TypeCount]
    by_status: List[StatusCount]
    regions_with_events: int
