"""Pydantic models for the stored entities.

Every entity carries a store-assigned integer `id`. Owner references
(`user_id`, `project_id`, `validation_id`) are plain integers; integrity is
checked by the logic layer, not by the models.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ValidationStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"


class TestCaseType(str, Enum):
    __test__ = False

    UI = "UI"
    FUNCTIONAL = "Functional"
    UX = "UX"
    ACCESSIBILITY = "Accessibility"
    VISUAL = "Visual"


class TestCaseSeverity(str, Enum):
    __test__ = False

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TestCaseStatus(str, Enum):
    __test__ = False

    NEW = "New"
    PASSED = "Passed"
    FAILED = "Failed"
    IN_PROGRESS = "In Progress"


class Inconsistency(BaseModel):
    """One discrepancy between a requirement and the design.

    `status` is normally Missing, Partial or Mismatch but stays an open string
    because results come from an external comparison collaborator.
    """

    name: str
    status: str
    description: str = ""
    requirement_id: Optional[str] = None
    design_element_id: Optional[str] = None


class MatchedElement(BaseModel):
    requirement_id: str
    design_element_id: str
    match: int = Field(ge=0, le=100)


class ValidationResults(BaseModel):
    inconsistencies: List[Inconsistency] = Field(default_factory=list)
    matched_elements: List[MatchedElement] = Field(default_factory=list)


class User(BaseModel):
    id: int
    username: str
    password: str
    email: str
    display_name: Optional[str] = None
    created_at: datetime


class Project(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    user_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class Document(BaseModel):
    id: int
    project_id: int
    name: str
    original_filename: str
    file_size: int = Field(gt=0)
    file_type: str
    content: Optional[str] = None
    extracted_requirements: Optional[Any] = None
    created_at: datetime


class DesignReference(BaseModel):
    id: int
    project_id: int
    name: str
    file_url: str
    file_key: Optional[str] = None
    access_token: Optional[str] = None
    thumbnail_url: Optional[str] = None
    last_accessed: datetime
    created_at: datetime


class Validation(BaseModel):
    id: int
    project_id: int
    started_at: datetime
    completed_at: Optional[datetime] = None
    status: ValidationStatus = ValidationStatus.IN_PROGRESS
    compliance_score: Optional[int] = Field(default=None, ge=0, le=100)
    compliant_elements: Optional[int] = Field(default=None, ge=0)
    inconsistencies: Optional[int] = Field(default=None, ge=0)
    results: Optional[ValidationResults] = None

    @property
    def is_complete(self) -> bool:
        return self.status == ValidationStatus.COMPLETE


class TestCase(BaseModel):
    __test__ = False

    id: int
    validation_id: int
    test_case_id: str
    name: str
    description: Optional[str] = None
    type: TestCaseType
    severity: TestCaseSeverity
    status: TestCaseStatus
    requirement: Optional[str] = None
    design_element: Optional[str] = None
    created_at: datetime


__all__ = [
    "ValidationStatus",
    "TestCaseType",
    "TestCaseSeverity",
    "TestCaseStatus",
    "Inconsistency",
    "MatchedElement",
    "ValidationResults",
    "User",
    "Project",
    "Document",
    "DesignReference",
    "Validation",
    "TestCase",
]
