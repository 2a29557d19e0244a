"""CORS configuration helpers.

Provides a small utility for applying CORS with the headers the dashboard
client needs to read. Keep this focused on configuration only.
"""

from __future__ import annotations

from typing import Iterable
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


# Headers that must be exposed to browsers
EXPOSE_HEADERS: list[str] = [
    "X-Request-Id",
    "Location",
]


def apply_cors(app: FastAPI, *, origins: Iterable[str] | None = None) -> None:
    allow = list(origins or ["*"])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in allow,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=EXPOSE_HEADERS,
    )


__all__ = ["apply_cors", "EXPOSE_HEADERS"]
