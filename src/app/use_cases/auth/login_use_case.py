"""
Login Use Case

Handles user authentication and returns a signed JWT.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import UserResponse
from src.domain.base import utcnow
from .dtos import LoginResponse

# Precomputed so unknown emails cost one bcrypt check, like known ones
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password give the same error
    - User must be active
    - Updates user.last_login
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email.lower())

            if user is None:
                # Always perform a hash check even if user not found
                bcrypt.checkpw(password.encode(), _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = bcrypt.checkpw(
                password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.active:
                return Return.err(Error("USER_DISABLED", "User account is disabled"))

            user.last_login = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            access_token = generate_jwt(user.id, user.role.value)

            return Return.ok(
                LoginResponse(access_token=access_token, user=UserResponse.from_entity(user))
            )
