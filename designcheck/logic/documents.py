"""Document commands: metadata registration, upload and parsed content.

Documents are created with `content` and `extracted_requirements` unset; the
parser collaborator fills both through `attach_parsed_content`.
"""

from __future__ import annotations

import logging
from typing import Any, List

from designcheck.config import UploadConfig
from designcheck.logic.document_parser import CannedDocumentParser
from designcheck.logic.errors import (
    CollaboratorError,
    InvalidInputError,
    NotFoundError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
    UpstreamError,
)
from designcheck.logic.events import DOCUMENT_PARSED, publish
from designcheck.logic.projects import get_project
from designcheck.logic.store import EntityStore
from designcheck.models.entities import Document
from designcheck.models.requests import DocumentCreate

logger = logging.getLogger(__name__)


def list_documents(store: EntityStore, project_id: int) -> List[Document]:
    get_project(store, project_id)
    return store.documents.list(project_id)


def get_document(store: EntityStore, document_id: int) -> Document:
    document = store.documents.get(document_id)
    if document is None:
        raise NotFoundError("Document", document_id)
    return document


def create_document(store: EntityStore, project_id: int, payload: DocumentCreate) -> Document:
    with store.atomic():
        get_project(store, project_id)
        document = store.documents.create({**payload.model_dump(), "project_id": project_id})
    logger.info("document_created id=%s project=%s file=%s", document.id, project_id, document.original_filename)
    return document


def attach_parsed_content(store: EntityStore, document_id: int, content: str, extracted_requirements: Any) -> Document:
    updated = store.documents.update(
        document_id, {"content": content, "extracted_requirements": extracted_requirements}
    )
    if updated is None:
        raise NotFoundError("Document", document_id)
    publish(DOCUMENT_PARSED, {"document_id": document_id, "content_length": len(content or "")})
    return updated


def upload_document(
    store: EntityStore,
    project_id: int,
    *,
    filename: str,
    mime_type: str,
    data: bytes,
    name: str | None,
    uploads: UploadConfig,
    parser: Any = None,
) -> Document:
    """Register an uploaded file and attach the parser's output to it."""
    get_project(store, project_id)
    if not filename:
        raise InvalidInputError("No file uploaded", [{"loc": ["body", "file"], "msg": "field required"}])
    if mime_type not in uploads.accepted_types:
        raise UnsupportedMediaTypeError(f"Unsupported file type: {mime_type}")
    if len(data) > uploads.max_bytes:
        raise PayloadTooLargeError(f"File exceeds {uploads.max_bytes} bytes")
    if not data:
        raise InvalidInputError("Uploaded file is empty", [{"loc": ["body", "file"], "msg": "file is empty"}])

    payload = DocumentCreate(
        name=(name or "").strip() or filename,
        original_filename=filename,
        file_size=len(data),
        file_type=mime_type,
    )
    parser = parser or CannedDocumentParser()
    try:
        parsed = parser.parse(filename, mime_type, data)
    except CollaboratorError as exc:
        logger.error("document_parse_failed project=%s file=%s error=%s", project_id, filename, exc)
        raise UpstreamError(f"Document parser failed: {exc}") from exc
    # Nothing is stored until the parser has succeeded
    with store.atomic():
        document = create_document(store, project_id, payload)
        return attach_parsed_content(store, document.id, parsed.content, parsed.extracted_requirements)


def delete_document(store: EntityStore, document_id: int) -> None:
    if not store.documents.delete(document_id):
        raise NotFoundError("Document", document_id)


__all__ = [
    "list_documents",
    "get_document",
    "create_document",
    "attach_parsed_content",
    "upload_document",
    "delete_document",
]
