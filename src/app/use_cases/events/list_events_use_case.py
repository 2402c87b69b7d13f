"""
List Events Use Case

Filtered, sorted and paginated event listing.
"""

import math

from libs.result import Error, Result, Return
from src.app.repositories.event_repository import EVENT_SORT_FIELDS, EventQuery
from src.app.services.unit_of_work import UnitOfWork
from .dtos import EventListResponse, EventResponse


class ListEventsUseCase:
    """
    Use case for the public event listing.

    Business Rules:
    - Search matches title, description, detailed description, outcome,
      the region's Arabic name or any linked person's Arabic name (OR)
    - regionId filters by region code; all other filters AND together
    - Year filters apply to start_date with inclusive Jan 1 / Dec 31 bounds
    - Unknown sort fields are rejected instead of silently ignored
    - total is computed with the same filters as the page
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: EventQuery) -> Result[EventListResponse]:
        if query.sort_by not in EVENT_SORT_FIELDS:
            return Return.err(
                Error(
                    "INVALID_SORT_FIELD",
                    f"Cannot sort by '{query.sort_by}'",
                    {"allowed": sorted(EVENT_SORT_FIELDS)},
                )
            )

        async with self.uow:
            events, total = await self.uow.events.list(query)

            return Return.ok(
                EventListResponse(
                    data=[EventResponse.from_entity(event) for event in events],
                    total=total,
                    page=query.page,
                    limit=query.limit,
                    total_pages=math.ceil(total / query.limit),
                )
            )
