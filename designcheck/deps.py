"""FastAPI dependency providers.

Shared objects are created once by `create_app()` and kept on `app.state`;
these helpers expose them to route handlers. Tests swap them through
`app.dependency_overrides` or by building the app with their own store.
"""

from __future__ import annotations

import random
from typing import Any

from fastapi import Request

from designcheck.config import AppConfig
from designcheck.logic.store import EntityStore


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng


def get_document_parser(request: Request) -> Any:
    return request.app.state.document_parser


def get_comparison_engine(request: Request) -> Any:
    return request.app.state.comparison_engine


__all__ = [
    "get_store",
    "get_config",
    "get_rng",
    "get_document_parser",
    "get_comparison_engine",
]
