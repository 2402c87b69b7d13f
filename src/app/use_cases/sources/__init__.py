"""
Source Use Cases

All source-related business logic.
"""

from .source_use_cases import (
    ListSourcesUseCase,
    GetSourceUseCase,
    SearchSourcesUseCase,
    CreateSourceUseCase,
    UpdateSourceUseCase,
    DeleteSourceUseCase,
)
from .dtos import CreateSourceCommand, UpdateSourceCommand, SourceDetailResponse

__all__ = [
    # Use Cases
    "ListSourcesUseCase",
    "GetSourceUseCase",
    "SearchSourcesUseCase",
    "CreateSourceUseCase",
    "UpdateSourceUseCase",
    "DeleteSourceUseCase",
    # DTOs
    "CreateSourceCommand",
    "UpdateSourceCommand",
    "SourceDetailResponse",
]
