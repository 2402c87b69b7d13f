from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.repositories.event_repository import EVENT_SORT_FIELDS, EventQuery
from src.app.use_cases.events import GetEventStatisticsUseCase, ListEventsUseCase
from src.domain.entities import Event, EventType, ReviewStatus


def make_event(title: str) -> Event:
    return Event(
        title=title,
        type=EventType.BATTLE,
        region_id=uuid4(),
        start_date=date(1836, 11, 21),
        description="First attempt on the city walls",
    )


@pytest.fixture
def mock_uow(mock_uow):
    mock_uow.events.list = AsyncMock(return_value=([], 0))
    mock_uow.events.count = AsyncMock(return_value=0)
    mock_uow.events.count_by_type = AsyncMock(return_value={})
    mock_uow.events.count_by_status = AsyncMock(return_value={})
    mock_uow.events.count_regions_with_events = AsyncMock(return_value=0)
    return mock_uow


@pytest.mark.asyncio
async def test_unknown_sort_field_is_rejected(mock_uow):
    """
    Given a sort field that is not sortable
    When events are listed
    Then INVALID_SORT_FIELD is returned with the allowed fields
    """
    result = await ListEventsUseCase(mock_uow).execute(EventQuery(sort_by="password"))

    assert result.is_err()
    assert result.error.code == "INVALID_SORT_FIELD"
    assert result.error.details["allowed"] == sorted(EVENT_SORT_FIELDS)
    mock_uow.events.list.assert_not_awaited()


@pytest.mark.asyncio
async def test_page_metadata(mock_uow):
    events = [make_event("Siege of Constantine"), make_event("Second siege")]
    mock_uow.events.list.return_value = (events, 45)
    query = EventQuery(page=3, limit=20, sort_by="title", sort_order="desc")

    result = await ListEventsUseCase(mock_uow).execute(query)

    assert result.is_ok()
    page = result.value
    assert page.total == 45
    assert page.page == 3
    assert page.limit == 20
    assert page.total_pages == 3
    assert [e.title for e in page.data] == ["Siege of Constantine", "Second siege"]
    mock_uow.events.list.assert_awaited_once_with(query)


@pytest.mark.asyncio
async def test_empty_listing_has_no_pages(mock_uow):
    result = await ListEventsUseCase(mock_uow).execute(EventQuery())

    assert result.value.total == 0
    assert result.value.total_pages == 0
    assert result.value.data == []


def test_query_skip():
    assert EventQuery(page=1, limit=20).skip == 0
    assert EventQuery(page=4, limit=25).skip == 75


@pytest.mark.asyncio
async def test_statistics(mock_uow):
    mock_uow.events.count.return_value = 5
    mock_uow.events.count_by_type.return_value = {EventType.BATTLE: 3, EventType.RAID: 2}
    mock_uow.events.count_by_status.return_value = {ReviewStatus.DRAFT: 5}
    mock_uow.events.count_regions_with_events.return_value = 2

    result = await GetEventStatisticsUseCase(mock_uow).execute()

    stats = result.value
    assert stats.total == 5
    assert {c.type: c.count for c in stats.by_type} == {EventType.BATTLE: 3, EventType.RAID: 2}
    assert [(c.status, c.count) for c in stats.by_status] == [(ReviewStatus.DRAFT, 5)]
    assert stats.regions_with_events == 2
