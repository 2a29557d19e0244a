"""SQLAlchemy engine construction for the SQL storage backend.

The service runs on SQLite by default (in-memory, shared across threads)
and accepts any SQLAlchemy URL through configuration or `DATABASE_URL`.
Only SQLAlchemy Core is used; no ORM sessions leak into route handlers.
"""

from __future__ import annotations

import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from designcheck.db.tables import metadata

logger = logging.getLogger(__name__)


def _db_url() -> str:
    return os.getenv("DATABASE_URL") or "sqlite+pysqlite:///:memory:"


def get_engine(url: str | None = None) -> Engine:
    """Return a new SQLAlchemy Engine for the given URL.

    Each store owns its engine so tests can build isolated stores. For SQLite
    in-memory URLs, use a StaticPool to keep a single connection alive across
    sessions and threads.
    """
    resolved_url = url or _db_url()
    kwargs: dict = {"future": True, "pool_pre_ping": True}
    if resolved_url.startswith("sqlite") and ":memory:" in resolved_url:
        # Keep a single in-memory DB connection shared across the process
        kwargs.update({
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        })
    return create_engine(resolved_url, **kwargs)


def create_schema(engine: Engine) -> None:
    """Create entity tables when missing."""
    metadata.create_all(engine)
    logger.info("sql_schema_ready url=%s", engine.url.render_as_string(hide_password=True))
