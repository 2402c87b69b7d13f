"""
Audit Dispatcher

Schedules audit log writes off the response path.
"""

import asyncio
import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable, Set

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import RecordAuditLogCommand, RecordAuditLogUseCase

logger = logging.getLogger(__name__)


class AuditDispatcher:
    """
    Fire-and-forget writer for audit log entries.

    Each dispatch spawns one detached task with its own unit of work, so the
    write neither delays the HTTP response nor shares the request's
    transaction. Failures are logged and never reach the caller.
    """

    def __init__(self, unit_of_work: Callable[[], AbstractAsyncContextManager[UnitOfWork]]):
        self._unit_of_work = unit_of_work
        self._pending: Set[asyncio.Task] = set()

    def dispatch(self, command: RecordAuditLogCommand) -> asyncio.Task:
        """Schedule exactly one write attempt for the command"""
        task = asyncio.create_task(self._record(command))
        # Keep a strong reference until the task finishes
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for every scheduled write to finish"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def _record(self, command: RecordAuditLogCommand) -> None:
        try:
            async with self._unit_of_work() as uow:
                result = await RecordAuditLogUseCase(uow).execute(command)
            if result.is_err():
                logger.error(
                    f"Failed to create audit log: {result.error.code} "
                    f"({command.action.value} {command.entity_type}/{command.entity_id})"
                )
        except Exception:
            logger.exception(
                f"Failed to create audit log for {command.entity_type}/{command.entity_id}"
            )
