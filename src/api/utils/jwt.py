from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ALGORITHM = "HS256"


def generate_jwt(user_id: UUID, role: str, expires_minutes: Optional[int] = None) -> str:
    """
    Issue an access token for a user.

    The payload carries the user id and the role the user had at login. The
    role claim is informational only: every request reloads the user, so a
    role change or deactivation takes effect before the token expires.

    Args:
        user_id: User UUID
        role: User role (VIEWER, EDITOR, ADMIN)
        expires_minutes: Lifetime override, defaults to JWT_EXPIRES_MINUTES
    """
    if expires_minutes is None:
        expires_minutes = ApplicationConfig.JWT_EXPIRES_MINUTES
    issued_at = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """Decoded payload, or None when the token is malformed, tampered with or expired"""
    try:
        return jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
