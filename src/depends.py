from typing import AsyncIterator, Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapter.database import Database
from src.api.error import ClientError
from src.api.utils.access import policy_for
from src.api.utils.jwt import verify_jwt
from src.app.services.authorization import Principal, check_access
from src.app.services.unit_of_work import UnitOfWork

# Missing credentials are handled by the access policy, not by the scheme
security = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_unit_of_work(
    database: Database = Depends(get_database),
) -> AsyncIterator[UnitOfWork]:
    async with database.unit_of_work() as uow:
        yield uow


async def resolve_principal(
    credentials: Optional[HTTPAuthorizationCredentials], database: Database
) -> Optional[Principal]:
    """
    Resolve a bearer token to the current, active user.

    The role always comes from the stored user, so role changes and
    deactivation apply to tokens that were issued before them.
    """
    if credentials is None:
        return None

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        return None

    try:
        user_id = UUID(payload["user_id"])
    except (KeyError, TypeError, ValueError):
        return None

    async with database.unit_of_work() as uow:
        async with uow:
            user = await uow.users.get_by_id(user_id)
            if user is None or not user.active:
                return None
            return Principal(id=user.id, role=user.role, name=user.name)


async def authorize(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    database: Database = Depends(get_database),
) -> Optional[Principal]:
    """
    Router-wide dependency enforcing the access policy of the matched route.

    Returns:
        The authenticated Principal, or None on public routes

    Raises:
        ClientError: 401 AUTHENTICATION_REQUIRED, 403 FORBIDDEN
    """
    route = request.scope.get("route")
    path_template = getattr(route, "path_format", request.url.path)
    policy = policy_for(request.method, path_template)

    # Public routes never look at the token
    if policy.public:
        return None

    principal = await resolve_principal(credentials, database)
    result = check_access(policy, principal.role if principal else None)
    if result.is_err():
        error = result.error
        if error.code == "AUTHENTICATION_REQUIRED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)

    request.state.principal = principal
    return principal
