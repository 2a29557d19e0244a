"""FastAPI application package init for the design validation service.

This package exposes a small FastAPI application factory. It wires only
cross-cutting concerns (request-id, CORS, problem+json handlers) and mounts
the API routers. Business logic lives in `designcheck/logic/` and route
handlers in `designcheck/routes/`.
"""

from __future__ import annotations

from designcheck.main import create_app

__all__ = ["create_app"]
