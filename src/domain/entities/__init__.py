"""
Atlas Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    EventType,
    ReviewStatus,
    SourceType,
    AuditAction,
)

# Export all entities
from .user import User
from .region import Region
from .source import Source
from .person import Person
from .tag import Tag
from .event import Event, MAX_EVENT_YEAR, MIN_EVENT_YEAR
from .event_source import EventSource
from .event_person import EventPerson
from .event_tag import EventTag
from .audit_log import AuditLog

__all__ = [
    # Enums
    "UserRole",
    "EventType",
    "ReviewStatus",
    "SourceType",
    "AuditAction",
    # Entities
    "User",
    "Region",
    "Source",
    "Person",
    "Tag",
    "Event",
    "EventSource",
    "EventPerson",
    "EventTag",
    "AuditLog",
    # Constants
    "MIN_EVENT_YEAR",
    "MAX_EVENT_YEAR",
]
