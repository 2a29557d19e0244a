"""Pydantic models for request bodies.

Write payloads reject unknown keys so typos surface as invalid input rather
than being silently merged into stored entities.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from designcheck.models.entities import ValidationResults, ValidationStatus


class _StrictBody(BaseModel):
    model_config = ConfigDict(extra="forbid")


class UserCreate(_StrictBody):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    display_name: Optional[str] = None


class ProjectCreate(_StrictBody):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    user_id: Optional[int] = Field(default=None, gt=0)


class ProjectUpdate(_StrictBody):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class DocumentCreate(_StrictBody):
    name: str = Field(min_length=1)
    original_filename: str = Field(min_length=1)
    file_size: int = Field(gt=0)
    file_type: str = Field(min_length=1)


class ParsedContent(_StrictBody):
    content: str
    extracted_requirements: Optional[Any] = None


class DesignReferenceCreate(_StrictBody):
    name: str = Field(min_length=1)
    file_url: str = Field(min_length=1)


class DesignReferenceUpdate(_StrictBody):
    name: Optional[str] = Field(default=None, min_length=1)
    file_url: Optional[str] = Field(default=None, min_length=1)
    access_token: Optional[str] = None
    thumbnail_url: Optional[str] = None


class ValidationCompletion(_StrictBody):
    compliance_score: int = Field(ge=0, le=100)
    compliant_elements: int = Field(ge=0)
    inconsistencies: Optional[int] = Field(default=None, ge=0)
    results: ValidationResults = Field(default_factory=ValidationResults)


class ValidationPatch(_StrictBody):
    status: Optional[ValidationStatus] = None
    completed_at: Optional[datetime] = None
    compliance_score: Optional[int] = Field(default=None, ge=0, le=100)
    compliant_elements: Optional[int] = Field(default=None, ge=0)
    inconsistencies: Optional[int] = Field(default=None, ge=0)
    results: Optional[ValidationResults] = None


class ExportRequest(BaseModel):
    # Unrecognised formats fall back to xlsx instead of failing
    format: Optional[Any] = None


__all__ = [
    "UserCreate",
    "ProjectCreate",
    "ProjectUpdate",
    "DocumentCreate",
    "ParsedContent",
    "DesignReferenceCreate",
    "DesignReferenceUpdate",
    "ValidationCompletion",
    "ValidationPatch",
    "ExportRequest",
]
