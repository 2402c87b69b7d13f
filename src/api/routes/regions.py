"""
Region API Routes

Lookups by opaque id and by external code are separate endpoints.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.regions import (
    CreateRegionCommand,
    CreateRegionUseCase,
    FeatureCollection,
    GetRegionByCodeUseCase,
    GetRegionUseCase,
    GetRegionsGeoJsonUseCase,
    ListRegionsUseCase,
    RegionDetailResponse,
    RegionResponse,
    UpdateRegionCommand,
    UpdateRegionUseCase,
)
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/regions",
    tags=["Regions"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[RegionResponse])
async def list_regions(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All regions ordered by code, with live event counts"""
    result = await ListRegionsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/geojson", status_code=status.HTTP_200_OK, response_model=FeatureCollection)
async def get_geojson(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Region boundaries as a GeoJSON FeatureCollection

    Each feature carries id, code, name_ar, name_en and event_count.
    Regions without geometry are omitted.
    """
    result = await GetRegionsGeoJsonUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/code/{code}", status_code=status.HTTP_200_OK, response_model=RegionDetailResponse)
async def get_region_by_code(code: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Region by Code

    Raises:
        - 404 Not Found: REGION_NOT_FOUND
    """
    result = await GetRegionByCodeUseCase(uow).execute(code)
    if result.is_err():
        error = result.error
        if error.code == "REGION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.get("/{id}", status_code=status.HTTP_200_OK, response_model=RegionDetailResponse)
async def get_region(id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Region by ID

    Raises:
        - 404 Not Found: REGION_NOT_FOUND
    """
    result = await GetRegionUseCase(uow).execute(id)
    if result.is_err():
        error = result.error
        if error.code == "REGION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RegionResponse)
async def create_region(
    request: CreateRegionCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Region (ADMIN)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 409 Conflict: REGION_CODE_EXISTS
        - 422 Unprocessable Entity: Invalid payload
    """
    result = await CreateRegionUseCase(uow).execute(request)
    if result.is_err():
        error = result.error
        if error.code == "REGION_CODE_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)
    return result.value


@router.put("/{id}", status_code=status.HTTP_200_OK, response_model=RegionResponse)
async def update_region(
    id: UUID, request: UpdateRegionCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Update Region (ADMIN)

    Raises:
        - 401 Unauthorized / 403 Forbidden
        - 404 Not Found: REGION_NOT_FOUND
    """
    result = await UpdateRegionUseCase(uow).execute(id, request)
    if result.is_err():
        error = result.error
        if error.code == "REGION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value
