"""Entity store holding one collection per entity kind.

The store is built once by the application factory and injected into route
handlers; tests build a fresh one per case. All collections share one
re-entrant lock so multi-step commands can run under `atomic()` without a
concurrent caller interleaving on the same entity.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from designcheck.config import StorageConfig
from designcheck.logic.collections import Collection, CollectionSpec, MemoryCollection
from designcheck.models.entities import DesignReference, Document, Project, TestCase, User, Validation

logger = logging.getLogger(__name__)

USERS = CollectionSpec("users", User)
PROJECTS = CollectionSpec("projects", Project, "user_id", ("created_at", "updated_at"), ("updated_at",))
DOCUMENTS = CollectionSpec("documents", Document, "project_id")
DESIGN_REFERENCES = CollectionSpec(
    "design_references", DesignReference, "project_id", ("created_at", "last_accessed"), ("last_accessed",)
)
VALIDATIONS = CollectionSpec("validations", Validation, "project_id", ("started_at",))
TEST_CASES = CollectionSpec("test_cases", TestCase, "validation_id")

CollectionFactory = Callable[[CollectionSpec, threading.RLock], Collection]


class EntityStore:
    def __init__(self, factory: Optional[CollectionFactory] = None, *, backend: str = "memory") -> None:
        self.backend = backend
        self._lock = threading.RLock()
        make = factory or MemoryCollection
        self.users: Collection[User] = make(USERS, self._lock)
        self.projects: Collection[Project] = make(PROJECTS, self._lock)
        self.documents: Collection[Document] = make(DOCUMENTS, self._lock)
        self.design_references: Collection[DesignReference] = make(DESIGN_REFERENCES, self._lock)
        self.validations: Collection[Validation] = make(VALIDATIONS, self._lock)
        self.test_cases: Collection[TestCase] = make(TEST_CASES, self._lock)

    @contextmanager
    def atomic(self) -> Iterator["EntityStore"]:
        """Serialize a read-then-write command against other mutations."""
        with self._lock:
            yield self


def build_store(cfg: Optional[StorageConfig] = None) -> EntityStore:
    cfg = cfg or StorageConfig()
    if cfg.backend == "sql":
        from designcheck.db import SqlCollection, create_schema, get_engine

        engine = get_engine(cfg.dsn)
        create_schema(engine)

        def factory(spec: CollectionSpec, lock: threading.RLock) -> Collection:
            return SqlCollection(spec, lock, engine=engine)

        logger.info("entity_store_built backend=sql")
        return EntityStore(factory, backend="sql")
    logger.info("entity_store_built backend=memory")
    return EntityStore(backend="memory")


__all__ = ["EntityStore", "build_store"]
