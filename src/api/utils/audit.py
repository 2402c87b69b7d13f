"""
Audited route

APIRoute subclass that records every mutating request against an audited
resource. The write is handed to the AuditDispatcher and never delays or
alters the response; a failed request is recorded and its exception
re-raised unchanged.
"""

import json
import logging
from typing import Any, Callable, Coroutine, Optional

from fastapi import HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute

from src.api.error import ClientError, ServerError
from src.app.use_cases.audit import RecordAuditLogCommand
from src.domain.entities import AuditAction

logger = logging.getLogger(__name__)

AUDITED_METHODS = {
    "POST": AuditAction.CREATE,
    "PUT": AuditAction.UPDATE,
    "PATCH": AuditAction.UPDATE,
    "DELETE": AuditAction.DELETE,
}

# Checked in order against the request path
ENTITY_TYPES = (
    ("/events", "event"),
    ("/sources", "source"),
    ("/regions", "region"),
    ("/users", "user"),
    ("/people", "person"),
)


def audit_action(method: str) -> Optional[AuditAction]:
    return AUDITED_METHODS.get(method.upper())


def entity_type_for(path: str) -> Optional[str]:
    """Resource type audited for a path, None when it is not audited"""
    if path.startswith("/auth"):
        return None
    for keyword, entity_type in ENTITY_TYPES:
        if keyword in path:
            return entity_type
    return None


def client_ip(request: Request) -> Optional[str]:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def error_message(exc: Exception) -> str:
    if isinstance(exc, (ClientError, ServerError)):
        return exc.base_error.message
    if isinstance(exc, RequestValidationError):
        return "Validation failed"
    if isinstance(exc, HTTPException):
        return str(exc.detail)
    return str(exc)


async def _json_body(request: Request) -> Any:
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


def _response_json(response: Response) -> Any:
    try:
        return json.loads(response.body)
    except (AttributeError, ValueError):
        return None


class AuditedRoute(APIRoute):
    """Route class used by every resource router"""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def audited_route_handler(request: Request) -> Response:
            action = audit_action(request.method)
            entity_type = entity_type_for(request.url.path)
            if action is None or entity_type is None:
                return await route_handler(request)

            attempted = await _json_body(request)

            try:
                response = await route_handler(request)
            except Exception as exc:
                _dispatch(
                    request,
                    entity_type,
                    action,
                    entity_id=request.path_params.get("id"),
                    old_data={"error": error_message(exc), "attempted": attempted},
                    new_data=None,
                )
                raise

            result = _response_json(response)
            response_id = result.get("id") if isinstance(result, dict) else None
            _dispatch(
                request,
                entity_type,
                action,
                entity_id=request.path_params.get("id") or response_id,
                old_data=attempted if action == AuditAction.UPDATE else None,
                new_data=result,
            )
            return response

        return audited_route_handler


def _dispatch(
    request: Request,
    entity_type: str,
    action: AuditAction,
    entity_id: Optional[str],
    old_data: Any,
    new_data: Any,
) -> None:
    # Nothing to attribute the change to (includes rejected authorization)
    principal = getattr(request.state, "principal", None)
    if principal is None:
        return

    command = RecordAuditLogCommand(
        user_id=principal.id,
        entity_type=entity_type,
        entity_id=str(entity_id) if entity_id else "unknown",
        action=action,
        old_data=old_data,
        new_data=new_data,
        ip_address=client_ip(request),
    )
    logger.debug(f"Audit {action.value} {entity_type}/{command.entity_id}")
    request.app.state.audit_dispatcher.dispatch(command)
