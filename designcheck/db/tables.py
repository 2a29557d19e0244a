"""SQLAlchemy Core tables mirroring the entity models.

Owner columns are indexed plain integers; ownership and cascade rules live in
the logic layer so both storage backends behave the same. `sqlite_autoincrement`
keeps SQLite from reusing identifiers after deletes.
"""

from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, Integer, MetaData, String, Table, Text

metadata = MetaData()

_AUTOINC = {"sqlite_autoincrement": True}


users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", Text, nullable=False),
    Column("password", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("display_name", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    **_AUTOINC,
)

projects = Table(
    "projects",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("user_id", Integer, nullable=True, index=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    **_AUTOINC,
)

documents = Table(
    "documents",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("project_id", Integer, nullable=False, index=True),
    Column("name", Text, nullable=False),
    Column("original_filename", Text, nullable=False),
    Column("file_size", Integer, nullable=False),
    Column("file_type", Text, nullable=False),
    Column("content", Text, nullable=True),
    Column("extracted_requirements", JSON(none_as_null=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    **_AUTOINC,
)

design_references = Table(
    "design_references",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("project_id", Integer, nullable=False, index=True),
    Column("name", Text, nullable=False),
    Column("file_url", Text, nullable=False),
    Column("file_key", Text, nullable=True),
    Column("access_token", Text, nullable=True),
    Column("thumbnail_url", Text, nullable=True),
    Column("last_accessed", DateTime(timezone=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    **_AUTOINC,
)

validations = Table(
    "validations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("project_id", Integer, nullable=False, index=True),
    Column("started_at", DateTime(timezone=True), nullable=False),
    Column("completed_at", DateTime(timezone=True), nullable=True),
    Column("status", String(20), nullable=False),
    Column("compliance_score", Integer, nullable=True),
    Column("compliant_elements", Integer, nullable=True),
    Column("inconsistencies", Integer, nullable=True),
    Column("results", JSON(none_as_null=True), nullable=True),
    **_AUTOINC,
)

test_cases = Table(
    "test_cases",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("validation_id", Integer, nullable=False, index=True),
    Column("test_case_id", String(20), nullable=False),
    Column("name", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("type", String(20), nullable=False),
    Column("severity", String(10), nullable=False),
    Column("status", String(20), nullable=False),
    Column("requirement", Text, nullable=True),
    Column("design_element", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    **_AUTOINC,
)

TABLES = {
    "users": users,
    "projects": projects,
    "documents": documents,
    "design_references": design_references,
    "validations": validations,
    "test_cases": test_cases,
}

__all__ = ["metadata", "TABLES"]
