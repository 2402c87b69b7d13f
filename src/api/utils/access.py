"""
Route access policies

One static table of (HTTP method, path template) -> AccessPolicy, consulted
by the authorize dependency on every request. Routes missing from the table
require an authenticated principal.
"""

from typing import Dict, Tuple

from src.app.services.authorization import AUTHENTICATED, PUBLIC, AccessPolicy, requires
from src.domain.entities import UserRole

EDITOR = requires(UserRole.EDITOR)
ADMIN = requires(UserRole.ADMIN)

ROUTE_POLICIES: Dict[Tuple[str, str], AccessPolicy] = {
    ("GET", "/health"): PUBLIC,
    # Auth
    ("POST", "/auth/login"): PUBLIC,
    ("GET", "/auth/me"): AUTHENTICATED,
    # Events
    ("GET", "/events"): PUBLIC,
    ("GET", "/events/statistics"): PUBLIC,
    ("GET", "/events/region/{region_code}"): PUBLIC,
    ("GET", "/events/{id}"): PUBLIC,
    ("POST", "/events"): EDITOR,
    ("PUT", "/events/{id}"): EDITOR,
    ("PATCH", "/events/{id}/status"): ADMIN,
    ("DELETE", "/events/{id}"): ADMIN,
    # Regions
    ("GET", "/regions"): PUBLIC,
    ("GET", "/regions/geojson"): PUBLIC,
    ("GET", "/regions/code/{code}"): PUBLIC,
    ("GET", "/regions/{id}"): PUBLIC,
    ("POST", "/regions"): ADMIN,
    ("PUT", "/regions/{id}"): ADMIN,
    # Sources
    ("GET", "/sources"): PUBLIC,
    ("GET", "/sources/search"): PUBLIC,
    ("GET", "/sources/{id}"): PUBLIC,
    ("POST", "/sources"): EDITOR,
    ("PUT", "/sources/{id}"): EDITOR,
    ("DELETE", "/sources/{id}"): ADMIN,
    # People
    ("GET", "/people"): PUBLIC,
    ("GET", "/people/{id}"): PUBLIC,
    ("POST", "/people"): EDITOR,
    ("PUT", "/people/{id}"): EDITOR,
    ("DELETE", "/people/{id}"): ADMIN,
    # Tags
    ("GET", "/tags"): PUBLIC,
    ("POST", "/tags"): EDITOR,
    # Users
    ("GET", "/users"): ADMIN,
    ("GET", "/users/{id}"): ADMIN,
    ("POST", "/users"): ADMIN,
    ("PATCH", "/users/{id}/role"): ADMIN,
    ("PATCH", "/users/{id}/deactivate"): ADMIN,
    # Audit
    ("GET", "/audit"): ADMIN,
    ("GET", "/audit/entity/{entity_type}/{entity_id}"): ADMIN,
    ("GET", "/audit/user/{user_id}"): ADMIN,
}


def policy_for(method: str, path_template: str) -> AccessPolicy:
    return ROUTE_POLICIES.get((method.upper(), path_template), AUTHENTICATED)
