"""
Shared Use Case DTOs

Wire format is camelCase JSON; Python attributes stay snake_case.
Nested summaries reused by several domains live here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities import Person, Region, Source, SourceType, Tag, User, UserRole


class CamelModel(BaseModel):
    """Base for every DTO exchanged with clients"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Nested Models
# ============================================================================


class RegionSummary(CamelModel):
    """Region reference embedded in event payloads"""

    id: str
    name_ar: str
    name_en: Optional[str] = None
    code: str

    @classmethod
    def from_entity(cls, region: Region) -> "RegionSummary":
        return cls(
            id=str(region.id), name_ar=region.name_ar, name_en=region.name_en, code=region.code
        )


class UserSummary(CamelModel):
    """Author reference (never exposes email or password hash)"""

    id: str
    name: str

    @classmethod
    def from_entity(cls, user: User) -> "UserSummary":
        return cls(id=str(user.id), name=user.name)


class UserResponse(CamelModel):
    """Full user record as seen by administrators and by the user themselves"""

    id: str
    email: str
    name: str
    role: UserRole
    active: bool
    last_login: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            role=user.role,
            active=user.active,
            last_login=user.last_login,
            created_at=user.created_at,
        )


class SourceResponse(CamelModel):
    id: str
    title: str
    author: Optional[str] = None
    year: Optional[int] = None
    publisher: Optional[str] = None
    type: SourceType
    url: Optional[str] = None
    isbn: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    event_count: Optional[int] = None

    @classmethod
    def from_entity(cls, source: Source, event_count: Optional[int] = None) -> "SourceResponse":
        return cls(
            id=str(source.id),
            title=source.title,
            author=source.author,
            year=source.year,
            publisher=source.publisher,
            type=source.type,
            url=source.url,
            isbn=source.isbn,
            notes=source.notes,
            created_at=source.created_at,
            event_count=event_count,
        )


class PersonResponse(CamelModel):
    id: str
    external_id: Optional[str] = None
    name_ar: str
    name_en: Optional[str] = None
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    bio: Optional[str] = None
    role: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, person: Person) -> "PersonResponse":
        return cls(
            id=str(person.id),
            external_id=person.external_id,
            name_ar=person.name_ar,
            name_en=person.name_en,
            birth_year=person.birth_year,
            death_year=person.death_year,
            bio=person.bio,
            role=person.role,
            created_at=person.created_at,
        )


class TagResponse(CamelModel):
    id: str
    name: str

    @classmethod
    def from_entity(cls, tag: Tag) -> "TagResponse":
        return cls(id=str(tag.id), name=tag.name)


class MessageResponse(CamelModel):
    """Acknowledgement for operations without a resource body"""

    id: str
    message: str
