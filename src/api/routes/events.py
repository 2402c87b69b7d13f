"""
Event API Routes

Public listing and lookups, editorial writes, admin review workflow.
"""

from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.repositories.event_repository import EventQuery
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse
from src.app.use_cases.events import (
    CreateEventCommand,
    CreateEventUseCase,
    DeleteEventUseCase,
    EventListResponse,
    EventResponse,
    EventStatisticsResponse,
    GetEventStatisticsUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    ListRegionEventsUseCase,
    UpdateEventCommand,
    UpdateEventStatusCommand,
    UpdateEventStatusUseCase,
    UpdateEventUseCase,
)
from src.depends import authorize, get_unit_of_work
from src.domain.entities import MAX_EVENT_YEAR, MIN_EVENT_YEAR, EventType, ReviewStatus

router = APIRouter(
    prefix="/events",
    tags=["Events"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


def _raise(error) -> None:
    if error.code.endswith("_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code in ("INVALID_DATE_RANGE", "DATE_OUT_OF_RANGE", "INVALID_SORT_FIELD"):
        raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=EventListResponse)
async def list_events(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=1000),
    sort_by: str = Query("startDate", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("asc", alias="sortOrder"),
    search: Optional[str] = Query(None, max_length=200),
    region_id: Optional[str] = Query(None, alias="regionId", description="Region code"),
    types: Optional[List[EventType]] = Query(None, alias="type"),
    start_year: Optional[int] = Query(None, alias="startYear", ge=MIN_EVENT_YEAR, le=MAX_EVENT_YEAR),
    end_year: Optional[int] = Query(None, alias="endYear", ge=MIN_EVENT_YEAR, le=MAX_EVENT_YEAR),
    review_status: Optional[ReviewStatus] = Query(None, alias="reviewStatus"),
):
    """
    List Events

    Filtered, sorted and paginated listing.

    Query Parameters:
        - search: matches title, descriptions, outcome, region name, people names
        - regionId: region CODE (not the region's id)
        - type: one or more event types (repeat the parameter)
        - startYear / endYear: inclusive bounds on the start date
        - reviewStatus: exact match
        - sortBy / sortOrder, page / limit

    Returns:
        - data, total, page, limit, totalPages

    Raises:
        - 422 Unprocessable Entity: Invalid parameters or unknown sort field
    """
    query = EventQuery(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        search=search or None,
        region_code=region_id or None,
        types=types or [],
        start_year=start_year,
        end_year=end_year,
        review_status=review_status,
    )

    result = await ListEventsUseCase(uow).execute(query)
    if result.is_err():
        _raise(result.error)

    return result.value


@router.get("/statistics", status_code=status.HTTP_200_OK, response_model=EventStatisticsResponse)
async def get_statistics(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Event counts by type and review status"""
    result = await GetEventStatisticsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get(
    "/region/{region_code}", status_code=status.HTTP_200_OK, response_model=List[EventResponse]
)
async def list_region_events(region_code: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Events of one region, by region CODE, oldest first.

    An unknown code returns an empty list.
    """
    result = await ListRegionEventsUseCase(uow).execute(region_code)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def get_event(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Event

    Raises:
        - 404 Not Found: EVENT_NOT_FOUND
    """
    result = await GetEventUseCase(uow).execute(id)
    if result.is_err():
        _raise(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventResponse)
async def create_event(
    request: CreateEventCommand,
    principal: Principal = Depends(authorize),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Event (EDITOR or above)

    The event always starts as DRAFT and is attributed to the caller.

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: REGION_NOT_FOUND, SOURCE_NOT_FOUND, PERSON_NOT_FOUND, TAG_NOT_FOUND
        - 422 Unprocessable Entity: Invalid payload, INVALID_DATE_RANGE, DATE_OUT_OF_RANGE
    """
    result = await CreateEventUseCase(uow).execute(request, principal.id)
    if result.is_err():
        _raise(result.error)
    return result.value


@router.put("/{id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def update_event(
    id: UUID,
    request: UpdateEventCommand,
    principal: Principal = Depends(authorize),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Event (EDITOR or above)

    Partial update; review status is changed only through PATCH /events/{id}/status.

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: EVENT_NOT_FOUND or a referenced row
        - 422 Unprocessable Entity: Invalid payload or date rules
    """
    result = await UpdateEventUseCase(uow).execute(id, request, principal.id)
    if result.is_err():
        _raise(result.error)
    return result.value


@router.patch("/{id}/status", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def update_event_status(
    id: UUID,
    request: UpdateEventStatusCommand,
    principal: Principal = Depends(authorize),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Review Status (ADMIN)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: EVENT_NOT_FOUND
    """
    result = await UpdateEventStatusUseCase(uow).execute(id, request.status, principal.id)
    if result.is_err():
        _raise(result.error)
    return result.value


@router.delete("/{id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_event(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Event (ADMIN)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: EVENT_NOT_FOUND
    """
    result = await DeleteEventUseCase(uow).execute(id)
    if result.is_err():
        _raise(result.error)
    return result.value
