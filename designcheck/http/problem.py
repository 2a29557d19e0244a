"""Problem+JSON utilities and global exception handlers.

Defines the RFC7807 media type and handler callables that turn every failure
into an application/problem+json response. Nothing raised by a route is
allowed to escape as a raw exception.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from designcheck.http.error_mapping import ERROR_MAP
from designcheck.logic.errors import DesigncheckError

PROBLEM_MEDIA_TYPE = "application/problem+json"

logger = logging.getLogger(__name__)


def problem_response(problem: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(
        jsonable_encoder(problem),
        status_code=int(problem.get("status", 500)),
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def handle_domain_error(request: Request, exc: DesigncheckError) -> JSONResponse:  # noqa: D401
    problem = exc.to_problem()
    logger.info(
        "error_handler.handle code=%s status=%s path=%s",
        problem.get("code"),
        problem.get("status"),
        request.url.path,
    )
    return problem_response(problem)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: D401
    status_code = int(getattr(exc, "status_code", 500) or 500)
    if isinstance(exc.detail, dict):
        problem = {"status": status_code, **exc.detail}
    else:
        problem = {
            "title": "Error",
            "status": status_code,
            "detail": str(exc.detail or ""),
        }
    response = problem_response(problem)
    if exc.headers:
        response.headers.update({str(k): str(v) for k, v in exc.headers.items()})
    return response


def _field_problems(exc: RequestValidationError) -> List[Dict[str, Any]]:
    problems: List[Dict[str, Any]] = []
    for error in exc.errors():
        problems.append(
            {
                "loc": list(error.get("loc", ())),
                "msg": str(error.get("msg", "")),
                "type": str(error.get("type", "")),
            }
        )
    return problems


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
    mapping = ERROR_MAP["invalid_input"]
    problem = {
        "title": mapping["title"],
        "status": mapping["status"],
        "detail": "Request validation failed",
        "code": mapping["code"],
        "errors": _field_problems(exc),
    }
    logger.info("validation_422 route=%s errors_cnt=%s", request.url.path, len(problem["errors"]))
    return problem_response(problem)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    logger.error("unexpected_error path=%s", request.url.path, exc_info=exc)
    mapping = ERROR_MAP["internal"]
    return problem_response(
        {
            "title": mapping["title"],
            "status": mapping["status"],
            "detail": "An unexpected error occurred",
            "code": mapping["code"],
        }
    )


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "problem_response",
    "handle_domain_error",
    "handle_http_exception",
    "handle_request_validation_error",
    "handle_unexpected_error",
]
