"""Project commands and the ownership cascade.

Deleting a project removes everything it owns: documents, design references
and validations, plus each validation's test cases. Owner references are not
enforced by the store, so the cascade runs here under one store lock.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from designcheck.logic.errors import InvalidInputError, NotFoundError
from designcheck.logic.events import PROJECT_DELETED, VALIDATION_DELETED, publish
from designcheck.logic.store import EntityStore
from designcheck.models.entities import Project
from designcheck.models.requests import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


def create_project(store: EntityStore, payload: ProjectCreate, default_owner_id: int) -> Project:
    data = payload.model_dump()
    if data.get("user_id") is None:
        data["user_id"] = default_owner_id
    project = store.projects.create(data)
    logger.info("project_created id=%s owner=%s", project.id, project.user_id)
    return project


def list_projects(store: EntityStore, owner_id: int) -> List[Project]:
    return store.projects.list(owner_id)


def get_project(store: EntityStore, project_id: int) -> Project:
    project = store.projects.get(project_id)
    if project is None:
        raise NotFoundError("Project", project_id)
    return project


def update_project(store: EntityStore, project_id: int, payload: ProjectUpdate) -> Project:
    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] is None:
        raise InvalidInputError("name cannot be null", [{"loc": ["body", "name"], "msg": "name cannot be null"}])
    updated = store.projects.update(project_id, changes)
    if updated is None:
        raise NotFoundError("Project", project_id)
    return updated


def delete_validation_tree(store: EntityStore, validation_id: int) -> int:
    """Delete a validation and its test cases; return the test cases removed."""
    with store.atomic():
        removed = 0
        for test_case in store.test_cases.list(validation_id):
            removed += int(store.test_cases.delete(test_case.id))
        if not store.validations.delete(validation_id):
            raise NotFoundError("Validation", validation_id)
    publish(VALIDATION_DELETED, {"validation_id": validation_id, "test_cases_removed": removed})
    return removed


def delete_project(store: EntityStore, project_id: int) -> Dict[str, int]:
    with store.atomic():
        get_project(store, project_id)
        summary = {"documents": 0, "design_references": 0, "validations": 0, "test_cases": 0}
        for document in store.documents.list(project_id):
            summary["documents"] += int(store.documents.delete(document.id))
        for reference in store.design_references.list(project_id):
            summary["design_references"] += int(store.design_references.delete(reference.id))
        for validation in store.validations.list(project_id):
            summary["test_cases"] += delete_validation_tree(store, validation.id)
            summary["validations"] += 1
        store.projects.delete(project_id)
    publish(PROJECT_DELETED, {"project_id": project_id, **summary})
    return summary


__all__ = [
    "create_project",
    "list_projects",
    "get_project",
    "update_project",
    "delete_project",
    "delete_validation_tree",
]
