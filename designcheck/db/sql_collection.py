"""SQL-backed entity collection (SQLAlchemy Core)."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from designcheck.db.tables import TABLES
from designcheck.logic.collections import Collection, CollectionSpec

logger = logging.getLogger(__name__)


def _as_row(mapping: Any) -> Dict[str, Any]:
    # SQLite drops tzinfo on DateTime(timezone=True); values are stored as UTC
    row = dict(mapping)
    for key, value in row.items():
        if isinstance(value, datetime) and value.tzinfo is None:
            row[key] = value.replace(tzinfo=timezone.utc)
    return row


class SqlCollection(Collection):
    def __init__(self, spec: CollectionSpec, lock: Optional[threading.RLock] = None, *, engine: Engine) -> None:
        super().__init__(spec, lock)
        self.engine = engine
        self.table = TABLES[spec.name]

    def _insert(self, row: Dict[str, Any]) -> int:
        with self.engine.begin() as conn:
            result = conn.execute(insert(self.table).values(**row))
            return int(result.inserted_primary_key[0])

    def _fetch(self, entity_id: int) -> Optional[Dict[str, Any]]:
        with self.engine.connect() as conn:
            found = conn.execute(
                select(self.table).where(self.table.c.id == entity_id)
            ).mappings().first()
        return _as_row(found) if found is not None else None

    def _select(self, criteria: Dict[str, Any]) -> List[Dict[str, Any]]:
        stmt = select(self.table)
        for key, value in criteria.items():
            stmt = stmt.where(self.table.c[key] == value)
        with self.engine.connect() as conn:
            rows = conn.execute(stmt.order_by(self.table.c.id)).mappings().all()
        return [_as_row(row) for row in rows]

    def _replace(self, entity_id: int, row: Dict[str, Any]) -> None:
        values = {k: v for k, v in row.items() if k != "id"}
        with self.engine.begin() as conn:
            conn.execute(update(self.table).where(self.table.c.id == entity_id).values(**values))

    def _remove(self, entity_id: int) -> bool:
        with self.engine.begin() as conn:
            result = conn.execute(delete(self.table).where(self.table.c.id == entity_id))
        return bool(result.rowcount)


__all__ = ["SqlCollection"]
