"""Requirement document endpoints.

Metadata-only creation and multipart upload both live here. The upload path
hands the bytes to the document parser collaborator and stores its output;
`PUT /documents/{id}/content` lets an external parser attach content later.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from designcheck.config import AppConfig
from designcheck.deps import get_config, get_document_parser, get_store
from designcheck.logic import documents as document_logic
from designcheck.logic.store import EntityStore
from designcheck.models.entities import Document
from designcheck.models.requests import DocumentCreate, ParsedContent

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/projects/{project_id}/documents", response_model=List[Document], summary="List project documents")
def list_documents(project_id: int, store: EntityStore = Depends(get_store)):
    return document_logic.list_documents(store, project_id)


@router.post(
    "/projects/{project_id}/documents",
    status_code=201,
    response_model=Document,
    summary="Register document metadata",
)
def create_document(project_id: int, payload: DocumentCreate, store: EntityStore = Depends(get_store)):
    return document_logic.create_document(store, project_id, payload)


@router.post(
    "/projects/{project_id}/documents/upload",
    status_code=201,
    response_model=Document,
    summary="Upload and parse a requirement document",
)
def upload_document(
    project_id: int,
    file: UploadFile = File(...),
    name: Optional[str] = Form(default=None),
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
    parser: Any = Depends(get_document_parser),
):
    # Read one byte past the limit so oversize files are detected without loading them whole
    data = file.file.read(config.uploads.max_bytes + 1)
    mime_type = (file.content_type or "application/octet-stream").split(";", 1)[0].strip().lower()
    logger.info(
        "upload_document_request",
        extra={"project_id": project_id, "file_name": file.filename, "mime_type": mime_type, "size_bytes": len(data)},
    )
    return document_logic.upload_document(
        store,
        project_id,
        filename=file.filename or "",
        mime_type=mime_type,
        data=data,
        name=name,
        uploads=config.uploads,
        parser=parser,
    )


@router.get("/documents/{document_id}", response_model=Document, summary="Get a document")
def get_document(document_id: int, store: EntityStore = Depends(get_store)):
    return document_logic.get_document(store, document_id)


@router.put("/documents/{document_id}/content", response_model=Document, summary="Attach parsed content")
def put_document_content(document_id: int, payload: ParsedContent, store: EntityStore = Depends(get_store)):
    return document_logic.attach_parsed_content(
        store, document_id, payload.content, payload.extracted_requirements
    )


@router.delete("/documents/{document_id}", status_code=204, summary="Delete a document")
def delete_document(document_id: int, store: EntityStore = Depends(get_store)) -> Response:
    document_logic.delete_document(store, document_id)
    return Response(status_code=204)


__all__ = ["router"]
