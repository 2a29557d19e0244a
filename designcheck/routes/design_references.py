"""Design reference endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response

from designcheck.config import AppConfig
from designcheck.deps import get_config, get_store
from designcheck.logic import design_references as reference_logic
from designcheck.logic.store import EntityStore
from designcheck.models.entities import DesignReference
from designcheck.models.requests import DesignReferenceCreate, DesignReferenceUpdate

router = APIRouter()


@router.get(
    "/projects/{project_id}/design-references",
    response_model=List[DesignReference],
    summary="List project design references",
)
def list_design_references(project_id: int, store: EntityStore = Depends(get_store)):
    return reference_logic.list_design_references(store, project_id)


@router.post(
    "/projects/{project_id}/design-references",
    status_code=201,
    response_model=DesignReference,
    summary="Register a design file by URL",
)
def create_design_reference(
    project_id: int,
    payload: DesignReferenceCreate,
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
):
    return reference_logic.create_design_reference(store, project_id, payload, config.design.host_marker)


@router.get("/design-references/{reference_id}", response_model=DesignReference, summary="Get a design reference")
def get_design_reference(reference_id: int, store: EntityStore = Depends(get_store)):
    return reference_logic.get_design_reference(store, reference_id)


@router.patch("/design-references/{reference_id}", response_model=DesignReference, summary="Update a design reference")
def update_design_reference(
    reference_id: int,
    payload: DesignReferenceUpdate,
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
):
    return reference_logic.update_design_reference(store, reference_id, payload, config.design.host_marker)


@router.delete("/design-references/{reference_id}", status_code=204, summary="Delete a design reference")
def delete_design_reference(reference_id: int, store: EntityStore = Depends(get_store)) -> Response:
    reference_logic.delete_design_reference(store, reference_id)
    return Response(status_code=204)


__all__ = ["router"]
