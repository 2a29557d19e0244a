"""Test case endpoints: listing, generation and export."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response

from designcheck.config import AppConfig
from designcheck.deps import get_config, get_rng, get_store
from designcheck.logic.errors import NotFoundError
from designcheck.logic.export import export_test_cases
from designcheck.logic.lifecycle import get_validation
from designcheck.logic.store import EntityStore
from designcheck.logic.synthesizer import generate_test_cases
from designcheck.models.entities import TestCase
from designcheck.models.requests import ExportRequest
from designcheck.models.responses import ExportDescriptor

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/validations/{validation_id}/test-cases",
    response_model=List[TestCase],
    summary="List test cases of a validation",
)
def list_test_cases(validation_id: int, store: EntityStore = Depends(get_store)):
    get_validation(store, validation_id)
    return store.test_cases.list(validation_id)


@router.post(
    "/validations/{validation_id}/test-cases/generate",
    response_model=List[TestCase],
    summary="Generate test cases, replacing earlier ones",
)
def post_generate_test_cases(
    validation_id: int,
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
    rng: random.Random = Depends(get_rng),
):
    return generate_test_cases(
        store,
        validation_id,
        rng,
        restamp=config.generation.restamp_validation_aggregates,
    )


@router.post(
    "/validations/{validation_id}/test-cases/export",
    response_model=ExportDescriptor,
    summary="Describe the export artifact for a validation's test cases",
)
def post_export_test_cases(
    validation_id: int,
    payload: Optional[ExportRequest] = Body(default=None),
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
):
    fmt = payload.format if payload is not None else None
    return export_test_cases(store, validation_id, fmt, config.export.download_prefix)


@router.get("/test-cases/{test_case_id}", response_model=TestCase, summary="Get a test case")
def get_test_case(test_case_id: int, store: EntityStore = Depends(get_store)):
    test_case = store.test_cases.get(test_case_id)
    if test_case is None:
        raise NotFoundError("TestCase", test_case_id)
    return test_case


@router.delete("/test-cases/{test_case_id}", status_code=204, summary="Delete a test case")
def delete_test_case(test_case_id: int, store: EntityStore = Depends(get_store)) -> Response:
    if not store.test_cases.delete(test_case_id):
        raise NotFoundError("TestCase", test_case_id)
    return Response(status_code=204)


__all__ = ["router"]
