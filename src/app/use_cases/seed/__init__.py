"""
Seed Use Cases
"""

from .seed_database_use_case import SeedDatabaseUseCase
from .dtos import SeedDocument, SeedSummary

__all__ = ["SeedDatabaseUseCase", "SeedDocument", "SeedSummary"]
