"""Design reference commands.

The file key is derived from the URL on create and whenever the URL
changes. `last_accessed` is refreshed by the store on every update.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from designcheck.logic.design_keys import resolve_design_key
from designcheck.logic.errors import InvalidInputError, NotFoundError
from designcheck.logic.projects import get_project
from designcheck.logic.store import EntityStore
from designcheck.models.entities import DesignReference
from designcheck.models.requests import DesignReferenceCreate, DesignReferenceUpdate

logger = logging.getLogger(__name__)


def list_design_references(store: EntityStore, project_id: int) -> List[DesignReference]:
    get_project(store, project_id)
    return store.design_references.list(project_id)


def get_design_reference(store: EntityStore, reference_id: int) -> DesignReference:
    reference = store.design_references.get(reference_id)
    if reference is None:
        raise NotFoundError("DesignReference", reference_id)
    return reference


def create_design_reference(
    store: EntityStore,
    project_id: int,
    payload: DesignReferenceCreate,
    host_marker: Optional[str] = None,
) -> DesignReference:
    file_key = resolve_design_key(payload.file_url, host_marker)
    if file_key is None:
        logger.warning("design_key_unresolved project=%s url=%s", project_id, payload.file_url)
    with store.atomic():
        get_project(store, project_id)
        reference = store.design_references.create(
            {
                **payload.model_dump(),
                "project_id": project_id,
                "file_key": file_key,
                "access_token": None,
                "thumbnail_url": None,
            }
        )
    return reference


def update_design_reference(
    store: EntityStore,
    reference_id: int,
    payload: DesignReferenceUpdate,
    host_marker: Optional[str] = None,
) -> DesignReference:
    changes = payload.model_dump(exclude_unset=True)
    for required in ("name", "file_url"):
        if required in changes and changes[required] is None:
            raise InvalidInputError(
                f"{required} cannot be null", [{"loc": ["body", required], "msg": f"{required} cannot be null"}]
            )
    if "file_url" in changes:
        changes["file_key"] = resolve_design_key(changes["file_url"], host_marker)
    updated = store.design_references.update(reference_id, changes)
    if updated is None:
        raise NotFoundError("DesignReference", reference_id)
    return updated


def delete_design_reference(store: EntityStore, reference_id: int) -> None:
    if not store.design_references.delete(reference_id):
        raise NotFoundError("DesignReference", reference_id)


__all__ = [
    "list_design_references",
    "get_design_reference",
    "create_design_reference",
    "update_design_reference",
    "delete_design_reference",
]
