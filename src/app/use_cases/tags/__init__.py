"""
Tag Use Cases
"""

from .tag_use_cases import CreateTagCommand, CreateTagUseCase, ListTagsUseCase

__all__ = ["ListTagsUseCase", "CreateTagUseCase", "CreateTagCommand"]
