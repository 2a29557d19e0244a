"""Export descriptors for a validation's test cases.

No file bytes are produced; the descriptor names the artifact a renderer
would serve. Unknown or missing formats fall back to xlsx.
"""

from __future__ import annotations

import logging
from typing import Any

from designcheck.logic.events import TEST_CASES_EXPORTED, publish
from designcheck.logic.lifecycle import get_validation
from designcheck.logic.store import EntityStore
from designcheck.models.responses import ExportDescriptor, ExportFormat

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = ExportFormat.XLSX


def normalize_format(value: Any) -> ExportFormat:
    try:
        return ExportFormat(str(value or "").strip().lower())
    except ValueError:
        if value:
            logger.info("export_format_fallback requested=%s", value)
        return DEFAULT_FORMAT


def build_export_descriptor(validation_id: int, fmt: Any, download_prefix: str = "/api/downloads") -> ExportDescriptor:
    resolved = normalize_format(fmt)
    file_name = f"test-cases-{validation_id}.{resolved.value}"
    return ExportDescriptor(
        download_url=f"{download_prefix.rstrip('/')}/{file_name}",
        format=resolved,
        file_name=file_name,
    )


def export_test_cases(
    store: EntityStore, validation_id: int, fmt: Any, download_prefix: str = "/api/downloads"
) -> ExportDescriptor:
    get_validation(store, validation_id)
    descriptor = build_export_descriptor(validation_id, fmt, download_prefix)
    publish(TEST_CASES_EXPORTED, {"validation_id": validation_id, "format": descriptor.format.value})
    return descriptor


__all__ = ["normalize_format", "build_export_descriptor", "export_test_cases"]
