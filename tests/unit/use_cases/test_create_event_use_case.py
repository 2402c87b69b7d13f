from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.repositories.event_repository import PersonLink, SourceLink
from src.app.use_cases.events import CreateEventCommand, CreateEventUseCase
from src.domain.entities import Person, Region, ReviewStatus, Source


@pytest.fixture
def region():
    return Region(code="31", name_ar="وهران", name_en="Oran")


@pytest.fixture
def mock_uow(mock_uow, region):
    mock_uow.regions.get_by_id = AsyncMock(return_value=region)
    mock_uow.sources.get_many = AsyncMock(return_value=[])
    mock_uow.people.get_many = AsyncMock(return_value=[])
    mock_uow.tags.get_many = AsyncMock(return_value=[])

    mock_uow.events.create = AsyncMock(side_effect=lambda event: event)
    mock_uow.events.replace_sources = AsyncMock()
    mock_uow.events.replace_people = AsyncMock()
    mock_uow.events.replace_tags = AsyncMock()
    mock_uow.events.get_with_relations = AsyncMock(
        side_effect=lambda event_id: mock_uow.events.create.call_args.args[0]
    )
    return mock_uow


def make_command(region_id, **overrides) -> CreateEventCommand:
    payload = {
        "title": "Battle of Sidi Brahim",
        "type": "BATTLE",
        "regionId": str(region_id),
        "startDate": "1845-09-23",
        "description": "Engagement between the emir's cavalry and a French column",
    }
    payload.update(overrides)
    return CreateEventCommand.model_validate(payload)


@pytest.mark.asyncio
async def test_create_forces_draft_status(mock_uow, region):
    """
    Given a payload that also carries reviewStatus CONFIRMED
    When the event is created
    Then it is stored and returned as DRAFT, authored by the caller
    """
    # Arrange
    user_id = uuid4()
    command = make_command(region.id, reviewStatus="CONFIRMED")

    # Act
    result = await CreateEventUseCase(mock_uow).execute(command, user_id)

    # Assert
    assert result.is_ok()
    created = mock_uow.events.create.call_args.args[0]
    assert created.review_status == ReviewStatus.DRAFT
    assert created.created_by_id == user_id
    assert result.value.review_status == ReviewStatus.DRAFT
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_unknown_region_writes_nothing(mock_uow):
    mock_uow.regions.get_by_id.return_value = None

    result = await CreateEventUseCase(mock_uow).execute(make_command(uuid4()), uuid4())

    assert result.is_err()
    assert result.error.code == "REGION_NOT_FOUND"
    mock_uow.events.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_unknown_source_writes_nothing(mock_uow, region):
    missing = uuid4()
    command = make_command(region.id, sourceIds=[str(missing)])

    result = await CreateEventUseCase(mock_uow).execute(command, uuid4())

    assert result.error.code == "SOURCE_NOT_FOUND"
    assert result.error.details == {"ids": [str(missing)]}
    mock_uow.events.create.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start,end,code",
    [
        ("1829-12-31", None, "DATE_OUT_OF_RANGE"),
        ("1955-01-01", None, "DATE_OUT_OF_RANGE"),
        ("1845-09-23", "1845-09-22", "INVALID_DATE_RANGE"),
    ],
)
async def test_create_rejects_bad_dates_before_touching_storage(mock_uow, region, start, end, code):
    command = make_command(region.id, startDate=start, endDate=end)

    result = await CreateEventUseCase(mock_uow).execute(command, uuid4())

    assert result.error.code == code
    mock_uow.__aenter__.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_accepts_historical_bounds(mock_uow, region):
    command = make_command(region.id, startDate="1830-01-01", endDate="1954-12-31")

    result = await CreateEventUseCase(mock_uow).execute(command, uuid4())

    assert result.is_ok()
    assert result.value.start_date == date(1830, 1, 1)


@pytest.mark.asyncio
async def test_create_links_people_and_sources(mock_uow, region):
    """
    Given existing people and sources
    When an event links them (one person listed twice)
    Then each link is written once, with the role sent for it
    """
    person = Person(name_ar="الأمير عبد القادر")
    source = Source(title="تاريخ الجزائر الحديث")
    mock_uow.people.get_many.return_value = [person]
    mock_uow.sources.get_many.return_value = [source]
    command = make_command(
        region.id,
        sourceIds=[str(source.id)],
        personIds=[
            {"personId": str(person.id), "role": "مشارك"},
            {"personId": str(person.id), "role": "قائد"},
        ],
    )

    result = await CreateEventUseCase(mock_uow).execute(command, uuid4())

    assert result.is_ok()
    event_id = mock_uow.events.create.call_args.args[0].id
    mock_uow.events.replace_sources.assert_awaited_once_with(event_id, [SourceLink(source.id)])
    mock_uow.events.replace_people.assert_awaited_once_with(
        event_id, [PersonLink(person.id, "قائد")]
    )
    mock_uow.events.replace_tags.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_stores_parties_without_empty_sides(mock_uow, region):
    command = make_command(region.id, parties={"resistance": ["Emir's cavalry"]})

    await CreateEventUseCase(mock_uow).execute(command, uuid4())

    created = mock_uow.events.create.call_args.args[0]
    assert created.parties == {"resistance": ["Emir's cavalry"]}
