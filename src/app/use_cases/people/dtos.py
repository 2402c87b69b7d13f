"""
People Use Case DTOs
"""

from typing import Optional

from pydantic import Field

from src.app.use_cases.dtos import CamelModel


class CreatePersonCommand(CamelModel):
    external_id: Optional[str] = Field(None, max_length=100)
    name_ar: str = Field(..., min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    bio: Optional[str] = Field(None, max_length=10000)
    role: Optional[str] = Field(None, max_length=255)


class UpdatePersonCommand(CamelModel):
    name_ar: Optional[str] = Field(None, min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    bio: Optional[str] = Field(None, max_length=10000)
    role: Optional[str] = Field(None, max_length=255)
