"""Database bootstrap utilities for the SQL storage backend.

This package exposes engine construction, the Core table definitions and the
SQL-backed collection. The DB layer does not leak ORM models into route
handlers; everything above it works with the pydantic entity models.
"""

from designcheck.db.base import create_schema, get_engine
from designcheck.db.sql_collection import SqlCollection

__all__ = [
    "get_engine",
    "create_schema",
    "SqlCollection",
]
