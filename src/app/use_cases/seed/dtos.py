"""
Seed Document DTOs

Shape of the JSON bulk-import file. Enum-like fields accept either the
canonical English value or the Arabic label used by the editorial team.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import Field

from src.app.use_cases.dtos import CamelModel
from src.domain.entities import UserRole


class SeedUser(CamelModel):
    email: str
    password: str
    name: str
    role: UserRole = UserRole.VIEWER


class SeedRegion(CamelModel):
    code: str
    name_ar: str
    name_en: Optional[str] = None
    geometry: Optional[Dict[str, Any]] = None


class SeedSource(CamelModel):
    id: str
    title: str
    author: Optional[str] = None
    year: Optional[int] = None
    publisher: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    isbn: Optional[str] = None
    notes: Optional[str] = None


class SeedSourceRef(CamelModel):
    id: str
    page_range: Optional[str] = None


class SeedPerson(CamelModel):
    id: str
    name_ar: str
    name_en: Optional[str] = None
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    bio: Optional[str] = None
    role: Optional[str] = None


class SeedEvent(CamelModel):
    id: str
    title: str
    type: Optional[str] = None
    region_code: str
    start_date: date
    end_date: Optional[date] = None
    description: str = ""
    detailed_description: Optional[str] = None
    coordinates: Optional[Dict[str, Any]] = None
    outcome: Optional[str] = None
    casualties_text: Optional[str] = None
    casualties_estimated: Optional[int] = None
    parties: Optional[Dict[str, Any]] = None
    review_status: Optional[str] = None
    sources: List[SeedSourceRef] = []
    people: List[SeedPerson] = []


class SeedDocument(CamelModel):
    users: List[SeedUser] = []
    regions: List[SeedRegion] = []
    sources: List[SeedSource] = []
    events: List[SeedEvent] = []


class SeedSummary(CamelModel):
    users: int = 0
    regions: int = 0
    sources: int = 0
    people: int = 0
    events_created: int = 0
    events_skipped: int = Field(0, description="Events whose region code is unknown")
