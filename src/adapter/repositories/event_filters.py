"""
Event query builder

Translates an EventQuery into SQL predicates and ordering. Both the count and
the page fetch are built from the same predicate list, so the total always
describes the rows being paged over.
"""

from datetime import date
from typing import Any, List

from sqlalchemy import or_
from sqlmodel import select

from src.app.repositories.event_repository import EVENT_SORT_FIELDS, EventQuery
from src.domain.entities import Event, EventPerson, Person, Region


LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """LIKE pattern matching text literally anywhere, to be used with escape=LIKE_ESCAPE"""
    for char in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(char, LIKE_ESCAPE + char)
    return f"%{text}%"


def contains(column: Any, text: str) -> Any:
    return column.ilike(contains_pattern(text), escape=LIKE_ESCAPE)


def search_condition(text: str) -> Any:
    """Case-insensitive substring match on any searchable field (OR)"""
    return or_(
        contains(Event.title, text),
        contains(Event.description, text),
        contains(Event.detailed_description, text),
        contains(Event.outcome, text),
        Event.region_id.in_(select(Region.id).where(contains(Region.name_ar, text))),
        Event.id.in_(
            select(EventPerson.event_id)
            .join(Person, Person.id == EventPerson.person_id)
            .where(contains(Person.name_ar, text))
        ),
    )


def build_conditions(query: EventQuery) -> List[Any]:
    """Every returned condition must hold (AND)"""
    conditions = []

    if query.search:
        conditions.append(search_condition(query.search))

    # Region filter is on the external code, not the opaque id
    if query.region_code:
        conditions.append(
            Event.region_id.in_(select(Region.id).where(Region.code == query.region_code))
        )

    if query.types:
        conditions.append(Event.type.in_(list(query.types)))

    if query.start_year is not None:
        conditions.append(Event.start_date >= date(query.start_year, 1, 1))

    if query.end_year is not None:
        conditions.append(Event.start_date <= date(query.end_year, 12, 31))

    if query.review_status is not None:
        conditions.append(Event.review_status == query.review_status)

    return conditions


def build_order_by(query: EventQuery) -> List[Any]:
    """
    Ordering for the page fetch.

    Raises:
        KeyError: sort_by is not a sortable field
    """
    column = getattr(Event, EVENT_SORT_FIELDS[query.sort_by])
    primary = column.desc() if query.sort_order == "desc" else column.asc()
    # Ties are broken by id so pages never overlap
    return [primary, Event.id.asc()]
