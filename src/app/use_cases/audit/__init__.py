"""
Audit Use Cases

All audit-related business logic.
"""

from .dtos import AuditLogResponse
from .get_audit_logs_use_case import (
    GetEntityAuditLogsUseCase,
    GetRecentAuditLogsUseCase,
    GetUserAuditLogsUseCase,
)
from .record_audit_log_use_case import RecordAuditLogCommand, RecordAuditLogUseCase

__all__ = [
    # Use Cases
    "RecordAuditLogUseCase",
    "GetRecentAuditLogsUseCase",
    "GetEntityAuditLogsUseCase",
    "GetUserAuditLogsUseCase",
    # DTOs
    "RecordAuditLogCommand",
    "AuditLogResponse",
]
