"""Validation lifecycle: in-progress -> complete.

A validation starts `in-progress` with every aggregate unset. The only way
out is completion, which stamps `completed_at` and stores the compliance
aggregates together with the ordered inconsistency list. Completion is not
retried or cancelled here; a comparison that fails leaves the validation
in-progress.

`patch_validation` is the generic merge used by external callers. It refuses
to move a complete validation back to in-progress and refuses aggregates on a
validation that stays in-progress.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from designcheck.logic.collections import utcnow
from designcheck.logic.errors import CollaboratorError, ConflictError, InvalidInputError, NotFoundError, UpstreamError
from designcheck.logic.events import VALIDATION_COMPLETED, VALIDATION_STARTED, publish
from designcheck.logic.projects import get_project
from designcheck.logic.store import EntityStore
from designcheck.models.entities import Validation, ValidationStatus
from designcheck.models.requests import ValidationCompletion, ValidationPatch

logger = logging.getLogger(__name__)

AGGREGATE_FIELDS = ("completed_at", "compliance_score", "compliant_elements", "inconsistencies", "results")


def start_validation(store: EntityStore, project_id: int) -> Validation:
    with store.atomic():
        get_project(store, project_id)
        validation = store.validations.create(
            {"project_id": project_id, "status": ValidationStatus.IN_PROGRESS}
        )
    publish(VALIDATION_STARTED, {"validation_id": validation.id, "project_id": project_id})
    return validation


def list_validations(store: EntityStore, project_id: int) -> List[Validation]:
    get_project(store, project_id)
    return store.validations.list(project_id)


def get_validation(store: EntityStore, validation_id: int) -> Validation:
    validation = store.validations.get(validation_id)
    if validation is None:
        raise NotFoundError("Validation", validation_id)
    return validation


def complete_validation(store: EntityStore, validation_id: int, completion: ValidationCompletion) -> Validation:
    with store.atomic():
        current = get_validation(store, validation_id)
        if current.is_complete:
            raise ConflictError(
                f"Validation {validation_id} is already complete", code="VALIDATION_ALREADY_COMPLETE"
            )
        count = completion.inconsistencies
        if count is None:
            count = len(completion.results.inconsistencies)
        updated = store.validations.update(
            validation_id,
            {
                "status": ValidationStatus.COMPLETE,
                "completed_at": utcnow(),
                "compliance_score": completion.compliance_score,
                "compliant_elements": completion.compliant_elements,
                "inconsistencies": count,
                "results": completion.results,
            },
        )
    publish(
        VALIDATION_COMPLETED,
        {"validation_id": validation_id, "compliance_score": completion.compliance_score, "inconsistencies": count},
    )
    return updated  # type: ignore[return-value]


def patch_validation(store: EntityStore, validation_id: int, patch: ValidationPatch) -> Validation:
    changes: Dict[str, Any] = patch.model_dump(exclude_unset=True)
    if "status" in changes and changes["status"] is None:
        raise InvalidInputError("status cannot be null", [{"loc": ["body", "status"], "msg": "status cannot be null"}])
    if "results" in changes and changes["results"] is not None:
        changes["results"] = patch.results
    with store.atomic():
        current = get_validation(store, validation_id)
        target = ValidationStatus(changes.get("status", current.status))
        if current.is_complete and target == ValidationStatus.IN_PROGRESS:
            raise ConflictError(
                f"Validation {validation_id} is complete and cannot return to in-progress",
                code="VALIDATION_STATUS_REGRESSION",
            )
        merged = {**current.model_dump(), **changes}
        if target == ValidationStatus.IN_PROGRESS:
            populated = [name for name in AGGREGATE_FIELDS if merged.get(name) is not None]
            if populated:
                raise ConflictError(
                    f"Fields {populated} can only be set on a complete validation",
                    code="VALIDATION_NOT_COMPLETE",
                )
        elif not current.is_complete and merged.get("completed_at") is None:
            changes["completed_at"] = utcnow()
        updated = store.validations.update(validation_id, changes)
    if target == ValidationStatus.COMPLETE and not current.is_complete:
        publish(VALIDATION_COMPLETED, {"validation_id": validation_id, "via": "patch"})
    return updated  # type: ignore[return-value]


def _collect_requirements(store: EntityStore, project_id: int) -> List[Dict[str, Any]]:
    requirements: List[Dict[str, Any]] = []
    for document in store.documents.list(project_id):
        extracted = document.extracted_requirements
        if isinstance(extracted, dict):
            extracted = extracted.get("requirements")
        if isinstance(extracted, list):
            requirements.extend(item for item in extracted if isinstance(item, dict))
    return requirements


def run_comparison(store: EntityStore, validation_id: int, engine: Any) -> Validation:
    """Ask the comparison collaborator for a result and complete with it."""
    validation = get_validation(store, validation_id)
    if validation.is_complete:
        raise ConflictError(f"Validation {validation_id} is already complete", code="VALIDATION_ALREADY_COMPLETE")
    requirements = _collect_requirements(store, validation.project_id)
    references = store.design_references.list(validation.project_id)
    logger.info(
        "comparison_started validation=%s requirements=%s design_references=%s",
        validation_id,
        len(requirements),
        len(references),
    )
    try:
        outcome = engine.compare(requirements, references)
    except CollaboratorError as exc:
        logger.error("comparison_failed validation=%s error=%s", validation_id, exc)
        raise UpstreamError(f"Comparison engine failed: {exc}") from exc
    return complete_validation(
        store,
        validation_id,
        ValidationCompletion(
            compliance_score=outcome.compliance_score,
            compliant_elements=outcome.compliant_elements,
            inconsistencies=outcome.inconsistency_count,
            results=outcome.results,
        ),
    )


__all__ = [
    "start_validation",
    "list_validations",
    "get_validation",
    "complete_validation",
    "patch_validation",
    "run_comparison",
]
