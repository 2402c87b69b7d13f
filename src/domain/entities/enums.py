"""
Atlas Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Editorial role of a user, ordered VIEWER < EDITOR < ADMIN"""

    VIEWER = "VIEWER"
    EDITOR = "EDITOR"
    ADMIN = "ADMIN"


class EventType(str, Enum):
    """Kind of historical event"""

    REVOLUTION = "REVOLUTION"
    UPRISING = "UPRISING"
    BATTLE = "BATTLE"
    SIEGE = "SIEGE"
    RESISTANCE = "RESISTANCE"
    RAID = "RAID"


class ReviewStatus(str, Enum):
    """Editorial trust label of an event"""

    DRAFT = "DRAFT"
    UNVERIFIED = "UNVERIFIED"
    NEEDS_REVIEW = "NEEDS_REVIEW"
    CONFIRMED = "CONFIRMED"


class SourceType(str, Enum):
    """Kind of cited source"""

    BOOK = "BOOK"
    ARTICLE = "ARTICLE"
    ARCHIVE = "ARCHIVE"
    ENCYCLOPEDIA = "ENCYCLOPEDIA"
    THESIS = "THESIS"
    WEBSITE = "WEBSITE"
    DOCUMENT = "DOCUMENT"


class AuditAction(str, Enum):
    """Mutation recorded in the audit log"""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
