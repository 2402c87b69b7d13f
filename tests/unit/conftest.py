import pytest
from unittest.mock import AsyncMock, MagicMock

REPOSITORIES = ("events", "regions", "sources", "people", "tags", "users", "audit_logs")


@pytest.fixture
def mock_uow():
    """Unit of work whose repositories answer every call with an awaitable mock"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # exceptions must propagate
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())
    return uow
