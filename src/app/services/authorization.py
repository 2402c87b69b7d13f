"""
Role-Hierarchy Authorization Gate

Decides whether a principal's role satisfies the roles an operation declares.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.domain.entities import UserRole

ROLE_LEVELS = {
    UserRole.VIEWER: 1,
    UserRole.EDITOR: 2,
    UserRole.ADMIN: 3,
}


@dataclass(frozen=True)
class AccessPolicy:
    """
    Access requirements of one operation.

    - public: no authentication at all (tokens are ignored)
    - required_roles: empty means any authenticated principal
    """

    required_roles: FrozenSet[UserRole] = field(default_factory=frozenset)
    public: bool = False


PUBLIC = AccessPolicy(public=True)
AUTHENTICATED = AccessPolicy()


def requires(*roles: UserRole) -> AccessPolicy:
    return AccessPolicy(required_roles=frozenset(roles))


def has_required_role(role: UserRole, required_roles: Iterable[UserRole]) -> bool:
    """
    True when the role's level is >= the level of any required role.

    A higher role satisfies every lower requirement, so {EDITOR} admits ADMIN.
    """
    level = ROLE_LEVELS[UserRole(role)]
    return any(level >= ROLE_LEVELS[UserRole(required)] for required in required_roles)


def check_access(policy: AccessPolicy, role: Optional[UserRole]) -> Result[None]:
    """
    Evaluate a policy for a principal role (None when unauthenticated).

    Returns:
        Ok, or Error AUTHENTICATION_REQUIRED / FORBIDDEN
    """
    if policy.public:
        return Return.ok(None)

    if role is None:
        return Return.err(
            Error("AUTHENTICATION_REQUIRED", "Authentication is required")
        )

    if not policy.required_roles:
        return Return.ok(None)

    if not has_required_role(role, policy.required_roles):
        return Return.err(Error("FORBIDDEN", "Insufficient permissions"))

    return Return.ok(None)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, resolved from the bearer token per request"""

    id: UUID
    role: UserRole
    name: str
