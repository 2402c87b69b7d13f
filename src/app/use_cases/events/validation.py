"""
Cross-field checks shared by event create and update.
"""

from datetime import date
from typing import Optional, Sequence
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MAX_EVENT_YEAR, MIN_EVENT_YEAR


def check_event_dates(start_date: date, end_date: Optional[date]) -> Optional[Error]:
    if not MIN_EVENT_YEAR <= start_date.year <= MAX_EVENT_YEAR:
        return Error(
            "DATE_OUT_OF_RANGE",
            f"Start date must fall between {MIN_EVENT_YEAR} and {MAX_EVENT_YEAR}",
            {"field": "startDate", "value": start_date.isoformat()},
        )
    if end_date is not None and end_date < start_date:
        return Error(
            "INVALID_DATE_RANGE",
            "End date must be on or after start date",
            {"startDate": start_date.isoformat(), "endDate": end_date.isoformat()},
        )
    return None


async def check_references(
    uow: UnitOfWork,
    region_id: Optional[UUID] = None,
    source_ids: Optional[Sequence[UUID]] = None,
    person_ids: Optional[Sequence[UUID]] = None,
    tag_ids: Optional[Sequence[UUID]] = None,
) -> Optional[Error]:
    """
    Verify that every referenced row exists.

    Returns the first failure, or None when all references resolve.
    """
    if region_id is not None:
        region = await uow.regions.get_by_id(region_id)
        if region is None:
            return Error("REGION_NOT_FOUND", f'Region with ID "{region_id}" not found')

    if source_ids:
        found = {source.id for source in await uow.sources.get_many(source_ids)}
        missing = [str(i) for i in source_ids if i not in found]
        if missing:
            return Error("SOURCE_NOT_FOUND", "Source not found", {"ids": missing})

    if person_ids:
        found = {person.id for person in await uow.people.get_many(person_ids)}
        missing = [str(i) for i in person_ids if i not in found]
        if missing:
            return Error("PERSON_NOT_FOUND", "Person not found", {"ids": missing})

    if tag_ids:
        found = {tag.id for tag in await uow.tags.get_many(tag_ids)}
        missing = [str(i) for i in tag_ids if i not in found]
        if missing:
            return Error("TAG_NOT_FOUND", "Tag not found", {"ids": missing})

    return None
