"""Project endpoints.

Projects default to the demo user as owner; there is no authentication.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from designcheck.config import AppConfig
from designcheck.deps import get_config, get_store
from designcheck.logic import projects as project_logic
from designcheck.logic.store import EntityStore
from designcheck.models.entities import Project
from designcheck.models.requests import ProjectCreate, ProjectUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/projects", response_model=List[Project], summary="List projects of a user")
def list_projects(
    user_id: Optional[int] = Query(default=None, gt=0),
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
):
    return project_logic.list_projects(store, user_id or config.demo.user_id)


@router.post("/projects", status_code=201, response_model=Project, summary="Create a project")
def create_project(
    payload: ProjectCreate,
    store: EntityStore = Depends(get_store),
    config: AppConfig = Depends(get_config),
):
    return project_logic.create_project(store, payload, default_owner_id=config.demo.user_id)


@router.get("/projects/{project_id}", response_model=Project, summary="Get a project")
def get_project(project_id: int, store: EntityStore = Depends(get_store)):
    return project_logic.get_project(store, project_id)


@router.patch("/projects/{project_id}", response_model=Project, summary="Update project name or description")
def update_project(project_id: int, payload: ProjectUpdate, store: EntityStore = Depends(get_store)):
    return project_logic.update_project(store, project_id, payload)


@router.delete("/projects/{project_id}", status_code=204, summary="Delete a project and everything it owns")
def delete_project(project_id: int, store: EntityStore = Depends(get_store)) -> Response:
    project_logic.delete_project(store, project_id)
    return Response(status_code=204)


__all__ = ["router"]
