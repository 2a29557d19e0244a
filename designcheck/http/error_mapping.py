"""Central error mapping for domain failures.

Single source of truth for mapping failure kinds to problem+json codes,
titles and HTTP statuses. Domain errors and handlers must import from here
instead of hardcoding strings or numbers.
"""

from __future__ import annotations

ERROR_MAP = {
    "not_found": {"code": "RESOURCE_NOT_FOUND", "title": "Not Found", "status": 404},
    "invalid_input": {"code": "REQUEST_INVALID", "title": "Invalid Request", "status": 422},
    "conflict": {"code": "STATE_CONFLICT", "title": "Conflict", "status": 409},
    "unsupported_media_type": {"code": "UPLOAD_TYPE_UNSUPPORTED", "title": "Unsupported Media Type", "status": 415},
    "payload_too_large": {"code": "UPLOAD_TOO_LARGE", "title": "Payload Too Large", "status": 413},
    "upstream": {"code": "UPSTREAM_FAILURE", "title": "Bad Gateway", "status": 502},
    "internal": {"code": "INTERNAL_ERROR", "title": "Internal Server Error", "status": 500},
}

__all__ = ["ERROR_MAP"]
