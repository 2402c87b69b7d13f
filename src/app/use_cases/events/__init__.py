"""
Event Use Cases

All event-related business logic.
"""

from .list_events_use_case import ListEventsUseCase
from .get_event_use_case import GetEventUseCase
from .create_event_use_case import CreateEventUseCase
from .update_event_use_case import UpdateEventUseCase
from .update_event_status_use_case import UpdateEventStatusUseCase
from .delete_event_use_case import DeleteEventUseCase
from .get_event_statistics_use_case import GetEventStatisticsUseCase
from .list_region_events_use_case import ListRegionEventsUseCase
from .dtos import (
    CreateEventCommand,
    UpdateEventCommand,
    UpdateEventStatusCommand,
    EventResponse,
    EventListResponse,
    EventStatisticsResponse,
    Coordinates,
    Parties,
    PersonAssignment,
)

__all__ = [
    # Use Cases
    "ListEventsUseCase",
    "GetEventUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "UpdateEventStatusUseCase",
    "DeleteEventUseCase",
    "GetEventStatisticsUseCase",
    "ListRegionEventsUseCase",
    # DTOs - Commands
    "CreateEventCommand",
    "UpdateEventCommand",
    "UpdateEventStatusCommand",
    # DTOs - Responses
    "EventResponse",
    "EventListResponse",
    "EventStatisticsResponse",
    # DTOs - Nested Models
    "Coordinates",
    "Parties",
    "PersonAssignment",
]
