from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TagResponse
from src.app.use_cases.tags import CreateTagCommand, CreateTagUseCase, ListTagsUseCase
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/tags",
    tags=["Tags"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TagResponse])
async def list_tags(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListTagsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TagResponse)
async def create_tag(request: CreateTagCommand, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Create Tag (EDITOR or above)

    Raises:
        - 409 Conflict: TAG_ALREADY_EXISTS
        - 422 Unprocessable Entity: VALIDATION_ERROR
    """
    result = await CreateTagUseCase(uow).execute(request)
    if result.is_err():
        error = result.error
        if error.code == "TAG_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)
    return result.value
