"""Pydantic models for response bodies that are not stored entities."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ExportFormat(str, Enum):
    XLSX = "xlsx"
    CSV = "csv"
    PDF = "pdf"


class ExportDescriptor(BaseModel):
    download_url: str
    format: ExportFormat
    file_name: str


class UserPublic(BaseModel):
    """User projection without the password."""

    id: int
    username: str
    email: str
    display_name: Optional[str] = None
    created_at: datetime


class Health(BaseModel):
    status: str
    storage: str


__all__ = ["ExportFormat", "ExportDescriptor", "UserPublic", "Health"]
