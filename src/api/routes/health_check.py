from fastapi import APIRouter, Depends, status

from src.api.utils.audit import AuditedRoute
from src.depends import authorize

router = APIRouter(route_class=AuditedRoute, dependencies=[Depends(authorize)])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe"""
    return {"status": "ok"}
