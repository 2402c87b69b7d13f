"""
Seed Database Use Case

Bulk-loads regions, sources, people and events from a seed document.
"""

import logging
from typing import Dict, Optional
from uuid import UUID

import bcrypt

from libs.result import Result, Return
from src.app.repositories.event_repository import PersonLink, SourceLink
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    Event,
    EventType,
    Person,
    Region,
    ReviewStatus,
    Source,
    SourceType,
    User,
    UserRole,
)
from src.domain.geo import ring_centroid
from .dtos import SeedDocument, SeedSummary

logger = logging.getLogger(__name__)

SOURCE_TYPES = {
    "كتاب": SourceType.BOOK,
    "مقال": SourceType.ARTICLE,
    "أرشيف": SourceType.ARCHIVE,
    "موسوعة": SourceType.ENCYCLOPEDIA,
    "رسالة": SourceType.THESIS,
    "موقع": SourceType.WEBSITE,
    "وثيقة": SourceType.DOCUMENT,
}

EVENT_TYPES = {
    "ثورة": EventType.REVOLUTION,
    "انتفاضة": EventType.UPRISING,
    "معركة": EventType.BATTLE,
    "حصار": EventType.SIEGE,
    "مقاومة": EventType.RESISTANCE,
    "غزوة": EventType.RAID,
}

REVIEW_STATUSES = {
    "مؤكد": ReviewStatus.CONFIRMED,
    "بحاجة_لمراجعة": ReviewStatus.NEEDS_REVIEW,
    "غير_مؤكد": ReviewStatus.UNVERIFIED,
    "مسودة": ReviewStatus.DRAFT,
}

# Role recorded for a linked person when the document gives none
DEFAULT_PARTICIPANT_ROLE = "مشارك"


def _lookup(label: Optional[str], labels: dict, enum_cls, default):
    if not label:
        return default
    if label in labels:
        return labels[label]
    try:
        return enum_cls(label)
    except ValueError:
        return default


class SeedDatabaseUseCase:
    """
    Use case for loading a seed document.

    Business Rules:
    - Users are created only when the email is not taken yet
    - Regions are upserted by code; the centroid comes from the geometry
    - People are deduplicated by their document id (stored as external_id),
      across events and across runs
    - Events whose region code is unknown are skipped and counted
    - Links to unknown sources are skipped with a warning
    - Everything is committed in one transaction
    """

    def __init__(self, uow: UnitOfWork, bcrypt_rounds: int = 12):
        self.uow = uow
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, document: SeedDocument) -> Result[SeedSummary]:
        summary = SeedSummary()

        async with self.uow:
            author_id = await self._seed_users(document, summary)
            regions = await self._seed_regions(document, summary)
            sources = await self._seed_sources(document, summary)
            people = await self._seed_people(document, summary)

            for item in document.events:
                region = regions.get(item.region_code) or await self.uow.regions.get_by_code(
                    item.region_code
                )
                if region is None:
                    logger.warning(
                        f"Region not found for code: {item.region_code} (event: {item.id})"
                    )
                    summary.events_skipped += 1
                    continue

                event = Event(
                    title=item.title,
                    type=_lookup(item.type, EVENT_TYPES, EventType, EventType.RESISTANCE),
                    region_id=region.id,
                    start_date=item.start_date,
                    end_date=item.end_date,
                    description=item.description,
                    detailed_description=item.detailed_description,
                    coordinates=item.coordinates,
                    outcome=item.outcome,
                    casualties_text=item.casualties_text,
                    casualties_estimated=item.casualties_estimated,
                    parties=item.parties,
                    review_status=_lookup(
                        item.review_status, REVIEW_STATUSES, ReviewStatus, ReviewStatus.DRAFT
                    ),
                    created_by_id=author_id,
                )
                event = await self.uow.events.create(event)

                source_links = {}
                for ref in item.sources:
                    if ref.id not in sources:
                        logger.warning(f"Source {ref.id} not found for event {item.id}")
                        continue
                    source_links[sources[ref.id]] = SourceLink(sources[ref.id], ref.page_range)
                if source_links:
                    await self.uow.events.replace_sources(event.id, list(source_links.values()))

                person_links = {
                    people[p.id]: PersonLink(people[p.id], p.role or DEFAULT_PARTICIPANT_ROLE)
                    for p in item.people
                }
                if person_links:
                    await self.uow.events.replace_people(event.id, list(person_links.values()))

                summary.events_created += 1

            await self.uow.commit()

        logger.info(
            f"Seed completed: {summary.regions} regions, {summary.sources} sources, "
            f"{summary.people} people, {summary.events_created} events "
            f"({summary.events_skipped} skipped)"
        )
        return Return.ok(summary)

    async def _seed_users(self, document: SeedDocument, summary: SeedSummary) -> Optional[UUID]:
        """Returns the id of the first admin, used as author of seeded events"""
        author_id = None
        for item in document.users:
            user = await self.uow.users.get_by_email(item.email.lower())
            if user is None:
                password_hash = bcrypt.hashpw(
                    item.password.encode(), bcrypt.gensalt(self.bcrypt_rounds)
                )
                user = await self.uow.users.create(
                    User(
                        email=item.email.lower(),
                        password_hash=password_hash.decode(),
                        name=item.name,
                        role=item.role,
                    )
                )
                summary.users += 1
            if author_id is None and user.role == UserRole.ADMIN:
                author_id = user.id
        return author_id

    async def _seed_regions(self, document: SeedDocument, summary: SeedSummary) -> Dict[str, Region]:
        regions = {}
        for item in document.regions:
            region = await self.uow.regions.get_by_code(item.code)
            is_new = region is None
            if is_new:
                region = Region(code=item.code, name_ar=item.name_ar, name_en=item.name_en)
            else:
                region.name_ar = item.name_ar
                if item.name_en is not None:
                    region.name_en = item.name_en

            if item.geometry:
                region.geometry = item.geometry
                centroid = ring_centroid(item.geometry)
                if centroid:
                    region.center_lat, region.center_lng = centroid

            if is_new:
                region = await self.uow.regions.create(region)
            else:
                region = await self.uow.regions.update(region)
            regions[item.code] = region
            summary.regions += 1
        return regions

    async def _seed_sources(self, document: SeedDocument, summary: SeedSummary) -> Dict[str, UUID]:
        sources = {}
        for item in document.sources:
            source = await self.uow.sources.create(
                Source(
                    title=item.title,
                    author=item.author,
                    year=item.year,
                    publisher=item.publisher,
                    type=_lookup(item.type, SOURCE_TYPES, SourceType, SourceType.BOOK),
                    url=item.url,
                    isbn=item.isbn or None,
                    notes=item.notes or None,
                )
            )
            sources[item.id] = source.id
            summary.sources += 1
        return sources

    async def _seed_people(self, document: SeedDocument, summary: SeedSummary) -> Dict[str, UUID]:
        people = {}
        for event in document.events:
            for item in event.people:
                if item.id in people:
                    continue
                person = await self.uow.people.get_by_external_id(item.id)
                if person is None:
                    person = await self.uow.people.create(
                        Person(
                            external_id=item.id,
                            name_ar=item.name_ar,
                            name_en=item.name_en,
                            birth_year=item.birth_year,
                            death_year=item.death_year,
                            bio=item.bio,
                            role=item.role,
                        )
                    )
                    summary.people += 1
                people[item.id] = person.id
        return people
