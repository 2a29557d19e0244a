"""Functional test bootstrap.

Every test gets its own store and application so no state leaks between
cases. Store-level tests run against both storage backends; the SQL backend
uses a private in-memory SQLite engine per store.
"""

from __future__ import annotations

import random
from typing import Any, Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from designcheck.config import AppConfig, DemoConfig, GenerationConfig, StorageConfig
from designcheck.logic.events import start_buffering, stop_buffering
from designcheck.logic.store import EntityStore, build_store
from designcheck.main import create_app


@pytest.fixture(autouse=True)
def event_buffer():
    start_buffering()
    yield
    stop_buffering()


@pytest.fixture(params=["memory", "sql"])
def store(request) -> EntityStore:
    return build_store(StorageConfig(backend=request.param))


@pytest.fixture
def memory_store() -> EntityStore:
    return build_store(StorageConfig(backend="memory"))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def _test_config(**overrides: Any) -> AppConfig:
    base = AppConfig(
        demo=DemoConfig(seed_data=False),
        generation=GenerationConfig(random_seed=42),
    )
    return base.model_copy(update=overrides)


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    def _make(config: AppConfig | None = None, **kwargs: Any) -> FastAPI:
        cfg = config or _test_config()
        kwargs.setdefault("store", build_store(cfg.storage))
        return create_app(cfg, **kwargs)

    return _make


@pytest.fixture
def app(make_app) -> FastAPI:
    return make_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def project(client) -> dict:
    resp = client.post("/api/projects", json={"name": "Checkout redesign", "description": "Q3 release"})
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def config_factory() -> Callable[..., AppConfig]:
    return _test_config
