"""Validation lifecycle endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Response

from designcheck.deps import get_comparison_engine, get_store
from designcheck.logic import lifecycle
from designcheck.logic.projects import delete_validation_tree
from designcheck.logic.store import EntityStore
from designcheck.models.entities import Validation
from designcheck.models.requests import ValidationCompletion, ValidationPatch

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/projects/{project_id}/validations", response_model=List[Validation], summary="List project validations")
def list_validations(project_id: int, store: EntityStore = Depends(get_store)):
    return lifecycle.list_validations(store, project_id)


@router.post(
    "/projects/{project_id}/validations",
    status_code=201,
    response_model=Validation,
    summary="Start a validation",
)
def start_validation(project_id: int, store: EntityStore = Depends(get_store)):
    return lifecycle.start_validation(store, project_id)


@router.get("/validations/{validation_id}", response_model=Validation, summary="Get a validation")
def get_validation(validation_id: int, store: EntityStore = Depends(get_store)):
    return lifecycle.get_validation(store, validation_id)


@router.patch("/validations/{validation_id}", response_model=Validation, summary="Merge fields into a validation")
def patch_validation(validation_id: int, payload: ValidationPatch, store: EntityStore = Depends(get_store)):
    return lifecycle.patch_validation(store, validation_id, payload)


@router.post(
    "/validations/{validation_id}/complete",
    response_model=Validation,
    summary="Attach comparison results and complete",
)
def complete_validation(
    validation_id: int, payload: ValidationCompletion, store: EntityStore = Depends(get_store)
):
    return lifecycle.complete_validation(store, validation_id, payload)


@router.post(
    "/validations/{validation_id}/compare",
    response_model=Validation,
    summary="Run the comparison collaborator and complete",
)
def run_comparison(
    validation_id: int,
    store: EntityStore = Depends(get_store),
    engine: Any = Depends(get_comparison_engine),
):
    return lifecycle.run_comparison(store, validation_id, engine)


@router.delete("/validations/{validation_id}", status_code=204, summary="Delete a validation and its test cases")
def delete_validation(validation_id: int, store: EntityStore = Depends(get_store)) -> Response:
    delete_validation_tree(store, validation_id)
    return Response(status_code=204)


__all__ = ["router"]
