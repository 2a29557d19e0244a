from __future__ import annotations

import logging
import random
from typing import Any, Optional

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from designcheck.config import AppConfig, load_config
from designcheck.deps import get_store
from designcheck.http.problem import (
    handle_domain_error,
    handle_http_exception,
    handle_request_validation_error,
    handle_unexpected_error,
)
from designcheck.http.request_id import RequestIdMiddleware
from designcheck.logging_setup import configure_logging
from designcheck.logic.comparison import CannedComparisonEngine
from designcheck.logic.document_parser import CannedDocumentParser
from designcheck.logic.errors import DesigncheckError
from designcheck.logic.seed import seed_demo_data
from designcheck.logic.store import EntityStore, build_store
from designcheck.middleware.cors import apply_cors
from designcheck.models.responses import Health
from designcheck.routes import api_router

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    *,
    store: Optional[EntityStore] = None,
    rng: Optional[random.Random] = None,
    document_parser: Any = None,
    comparison_engine: Any = None,
) -> FastAPI:
    """Build the application and its shared state.

    Every argument is optional; omitted ones come from `load_config()` and the
    built-in collaborator stand-ins. Passing a fresh store per test keeps
    tests isolated.
    """
    cfg = config or load_config()
    configure_logging(cfg.logging.level)
    app = FastAPI(
        title="Design Validation Service",
        description="Compare requirement documents with design files and generate test cases",
        version="0.1.0",
    )

    app.state.config = cfg
    app.state.store = store or build_store(cfg.storage)
    app.state.rng = rng or random.Random(cfg.generation.random_seed)
    app.state.document_parser = document_parser or CannedDocumentParser()
    app.state.comparison_engine = comparison_engine or CannedComparisonEngine()
    if cfg.demo.seed_data:
        seed_demo_data(app.state.store)

    app.add_exception_handler(DesigncheckError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    apply_cors(app, origins=cfg.cors_origins)
    # Registered last so it wraps CORS and stamps every response
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router, prefix="/api")

    @app.get("/health", response_model=Health, include_in_schema=False)
    def health(store: EntityStore = Depends(get_store)):
        return Health(status="ok", storage=store.backend)

    logger.info(
        "app_created storage=%s seed=%s restamp=%s",
        app.state.store.backend,
        cfg.demo.seed_data,
        cfg.generation.restamp_validation_aggregates,
    )
    return app


__all__ = ["create_app"]
