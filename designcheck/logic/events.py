"""Domain event constants and publisher.

Defines event type constants and a simple publish() callable used by the
project, validation and test-case flows. Events are always logged. Keeping
them in memory is opt-in through `start_buffering()`; the buffer holds at
most `limit` events.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List, Optional

logger = logging.getLogger(__name__)

PROJECT_DELETED = "project.deleted"
DOCUMENT_PARSED = "document.parsed"
VALIDATION_STARTED = "validation.started"
VALIDATION_COMPLETED = "validation.completed"
VALIDATION_DELETED = "validation.deleted"
TEST_CASES_GENERATED = "test_cases.generated"
TEST_CASES_EXPORTED = "test_cases.exported"

DEFAULT_BUFFER_LIMIT = 1000

_buffer: Optional[Deque[Dict[str, Any]]] = None
_buffer_lock = threading.Lock()


def publish(event_type: str, payload: Dict[str, Any]) -> None:
    """Publish a domain event: log it, and buffer it when buffering is on."""
    logger.info("event_publish type=%s payload=%s", event_type, payload)
    with _buffer_lock:
        if _buffer is not None:
            _buffer.append({"type": event_type, "payload": payload})


def start_buffering(limit: int = DEFAULT_BUFFER_LIMIT) -> None:
    """Keep the most recent `limit` events in memory, dropping older ones."""
    global _buffer
    with _buffer_lock:
        _buffer = deque(maxlen=limit)


def stop_buffering() -> None:
    global _buffer
    with _buffer_lock:
        _buffer = None


def get_buffered_events(clear: bool = True) -> List[Dict[str, Any]]:
    """Return buffered events (empty when buffering is off); optionally clear."""
    with _buffer_lock:
        if _buffer is None:
            return []
        events = list(_buffer)
        if clear:
            _buffer.clear()
    return events


__all__ = [
    "PROJECT_DELETED",
    "DOCUMENT_PARSED",
    "VALIDATION_STARTED",
    "VALIDATION_COMPLETED",
    "VALIDATION_DELETED",
    "TEST_CASES_GENERATED",
    "TEST_CASES_EXPORTED",
    "DEFAULT_BUFFER_LIMIT",
    "publish",
    "start_buffering",
    "stop_buffering",
    "get_buffered_events",
]
