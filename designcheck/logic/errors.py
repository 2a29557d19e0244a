"""Domain error taxonomy.

Logic modules raise these; the HTTP layer renders them as problem+json using
`designcheck.http.error_mapping.ERROR_MAP`. Store lookups never raise; the
logic layer turns a missing entity into `NotFoundError`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from designcheck.http.error_mapping import ERROR_MAP


class DesigncheckError(Exception):
    kind = "internal"

    def __init__(self, detail: str, *, code: Optional[str] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.code = code or ERROR_MAP[self.kind]["code"]

    @property
    def status(self) -> int:
        return int(ERROR_MAP[self.kind]["status"])

    def to_problem(self) -> Dict[str, Any]:
        return {
            "title": ERROR_MAP[self.kind]["title"],
            "status": self.status,
            "detail": self.detail,
            "code": self.code,
        }


class NotFoundError(DesigncheckError):
    kind = "not_found"

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidInputError(DesigncheckError):
    kind = "invalid_input"

    def __init__(self, detail: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(detail)
        self.errors = list(errors or [])

    def to_problem(self) -> Dict[str, Any]:
        problem = super().to_problem()
        problem["errors"] = self.errors
        return problem


class ConflictError(DesigncheckError):
    kind = "conflict"


class UnsupportedMediaTypeError(DesigncheckError):
    kind = "unsupported_media_type"


class PayloadTooLargeError(DesigncheckError):
    kind = "payload_too_large"


class UpstreamError(DesigncheckError):
    kind = "upstream"


class CollaboratorError(Exception):
    """Raised by external collaborators (parser, comparison engine, exporter)."""


__all__ = [
    "DesigncheckError",
    "NotFoundError",
    "InvalidInputError",
    "ConflictError",
    "UnsupportedMediaTypeError",
    "PayloadTooLargeError",
    "UpstreamError",
    "CollaboratorError",
]
