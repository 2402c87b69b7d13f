from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.audit import AuditedRoute
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import LoadProfileUseCase, LoginResponse, LoginUseCase
from src.app.use_cases.dtos import UserResponse
from src.depends import authorize, get_unit_of_work

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    route_class=AuditedRoute,
    dependencies=[Depends(authorize)],
)


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Authenticates user and returns a JWT access token with the user record.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: User disabled
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "USER_DISABLED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    # Return Pydantic model directly (FastAPI auto-serializes)
    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_me(
    principal: Principal = Depends(authorize),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Returns the account behind the bearer token.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(principal.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
