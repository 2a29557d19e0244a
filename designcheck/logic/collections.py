"""Keyed entity collections.

A collection owns one entity kind. It assigns identifiers, stamps
timestamps and validates rows through the kind's pydantic model. Rows are
kept as plain dicts so the dict-backed and SQL-backed collections share the
same conversion path; callers always receive fresh model instances.

Lookups by an unknown identifier return None (or False for delete); they
never raise.
"""

from __future__ import annotations

import copy
import itertools
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel


ModelT = TypeVar("ModelT", bound=BaseModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CollectionSpec:
    name: str
    model: Type[BaseModel]
    owner_field: Optional[str] = None
    create_stamps: Tuple[str, ...] = ("created_at",)
    update_stamps: Tuple[str, ...] = field(default_factory=tuple)


def _storable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


def to_row(entity: BaseModel) -> Dict[str, Any]:
    """Dump a model to a storable dict.

    Enum members become their values. Timestamps are stored in UTC; naive
    ones are taken to be UTC already.
    """
    row = entity.model_dump()
    return {key: _storable(value) for key, value in row.items()}


class Collection(Generic[ModelT]):
    """Backend-neutral collection logic; subclasses provide row storage."""

    def __init__(self, spec: CollectionSpec, lock: Optional[threading.RLock] = None) -> None:
        self.spec = spec
        self.model = spec.model
        self._lock = lock or threading.RLock()

    # -- storage primitives -------------------------------------------------
    def _insert(self, row: Dict[str, Any]) -> int:
        raise NotImplementedError

    def _fetch(self, entity_id: int) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def _select(self, criteria: Dict[str, Any]) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def _replace(self, entity_id: int, row: Dict[str, Any]) -> None:
        raise NotImplementedError

    def _remove(self, entity_id: int) -> bool:
        raise NotImplementedError

    # -- public contract ----------------------------------------------------
    def list(self, owner_id: Optional[int] = None) -> List[ModelT]:
        criteria: Dict[str, Any] = {}
        if owner_id is not None and self.spec.owner_field:
            criteria[self.spec.owner_field] = owner_id
        return self.find(**criteria)

    def find(self, **criteria: Any) -> List[ModelT]:
        with self._lock:
            rows = self._select(criteria)
        return [self.model.model_validate(row) for row in rows]  # type: ignore[misc]

    def get(self, entity_id: int) -> Optional[ModelT]:
        with self._lock:
            row = self._fetch(int(entity_id))
        if row is None:
            return None
        return self.model.model_validate(row)  # type: ignore[return-value]

    def create(self, payload: Dict[str, Any]) -> ModelT:
        with self._lock:
            now = utcnow()
            data = {k: v for k, v in dict(payload).items() if k != "id"}
            for stamp in self.spec.create_stamps:
                data.setdefault(stamp, now)
            # Validate before an id is consumed so a bad payload never burns one
            draft = self.model.model_validate({**data, "id": 0})
            row = to_row(draft)
            row.pop("id", None)
            new_id = self._insert(row)
            return self.model.model_validate({**row, "id": new_id})  # type: ignore[return-value]

    def update(self, entity_id: int, changes: Dict[str, Any]) -> Optional[ModelT]:
        with self._lock:
            current = self._fetch(int(entity_id))
            if current is None:
                return None
            merged = {**current, **{k: v for k, v in dict(changes).items() if k != "id"}}
            now = utcnow()
            for stamp in self.spec.update_stamps:
                merged[stamp] = now
            row = to_row(self.model.model_validate(merged))
            self._replace(int(entity_id), row)
            return self.model.model_validate({**row, "id": int(entity_id)})  # type: ignore[return-value]

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._remove(int(entity_id))

    def __iter__(self) -> Iterator[ModelT]:
        return iter(self.list())


class MemoryCollection(Collection[ModelT]):
    """Dict-backed collection with a monotonic id counter (ids never reused)."""

    def __init__(self, spec: CollectionSpec, lock: Optional[threading.RLock] = None) -> None:
        super().__init__(spec, lock)
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def _insert(self, row: Dict[str, Any]) -> int:
        new_id = next(self._ids)
        self._rows[new_id] = {**copy.deepcopy(row), "id": new_id}
        return new_id

    def _fetch(self, entity_id: int) -> Optional[Dict[str, Any]]:
        row = self._rows.get(entity_id)
        return copy.deepcopy(row) if row is not None else None

    def _select(self, criteria: Dict[str, Any]) -> List[Dict[str, Any]]:
        matches = [
            copy.deepcopy(row)
            for row in self._rows.values()
            if all(row.get(key) == value for key, value in criteria.items())
        ]
        return sorted(matches, key=lambda row: int(row["id"]))

    def _replace(self, entity_id: int, row: Dict[str, Any]) -> None:
        self._rows[entity_id] = {**copy.deepcopy(row), "id": entity_id}

    def _remove(self, entity_id: int) -> bool:
        return self._rows.pop(entity_id, None) is not None


__all__ = [
    "CollectionSpec",
    "Collection",
    "MemoryCollection",
    "to_row",
    "utcnow",
]
