"""Validation lifecycle rules at the logic layer."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from designcheck.logic import lifecycle
from designcheck.logic.comparison import CannedComparisonEngine
from designcheck.logic.errors import CollaboratorError, ConflictError, InvalidInputError, NotFoundError, UpstreamError
from designcheck.logic.events import VALIDATION_COMPLETED, VALIDATION_STARTED, get_buffered_events
from designcheck.logic.projects import create_project
from designcheck.models.entities import ValidationStatus
from designcheck.models.requests import ProjectCreate, ValidationCompletion, ValidationPatch


@pytest.fixture
def project(store):
    return create_project(store, ProjectCreate(name="Storefront"), default_owner_id=1)


def _completion(**overrides):
    body = {
        "compliance_score": 87,
        "compliant_elements": 23,
        "results": {
            "inconsistencies": [
                {"name": "Login Form Field Validation", "status": "Missing", "description": "d1"},
                {"name": "Product Filter Options", "status": "Partial", "description": "d2"},
            ]
        },
    }
    body.update(overrides)
    return ValidationCompletion.model_validate(body)


def test_started_validation_is_in_progress_without_aggregates(store, project):
    validation = lifecycle.start_validation(store, project.id)
    assert validation.status == ValidationStatus.IN_PROGRESS
    assert validation.started_at is not None
    assert validation.completed_at is None
    assert validation.compliance_score is None
    assert validation.results is None
    assert [e["type"] for e in get_buffered_events()] == [VALIDATION_STARTED]


def test_start_on_unknown_project_is_not_found(store):
    with pytest.raises(NotFoundError):
        lifecycle.start_validation(store, 9999)


def test_complete_sets_status_timestamp_and_aggregates(store, project):
    validation = lifecycle.start_validation(store, project.id)
    done = lifecycle.complete_validation(store, validation.id, _completion(inconsistencies=3))

    assert done.status == ValidationStatus.COMPLETE
    assert done.completed_at is not None
    assert done.completed_at >= done.started_at
    assert done.compliance_score == 87
    assert done.compliant_elements == 23
    assert done.inconsistencies == 3
    assert [i.name for i in done.results.inconsistencies] == [
        "Login Form Field Validation",
        "Product Filter Options",
    ]
    assert VALIDATION_COMPLETED in [e["type"] for e in get_buffered_events()]


def test_inconsistency_count_defaults_to_result_length(store, project):
    validation = lifecycle.start_validation(store, project.id)
    done = lifecycle.complete_validation(store, validation.id, _completion())
    assert done.inconsistencies == 2


def test_completing_twice_is_a_conflict(store, project):
    validation = lifecycle.start_validation(store, project.id)
    lifecycle.complete_validation(store, validation.id, _completion())
    with pytest.raises(ConflictError) as info:
        lifecycle.complete_validation(store, validation.id, _completion())
    assert info.value.code == "VALIDATION_ALREADY_COMPLETE"


def test_complete_unknown_validation_is_not_found(store):
    with pytest.raises(NotFoundError):
        lifecycle.complete_validation(store, 9999, _completion())


def test_patch_cannot_move_complete_back_to_in_progress(store, project):
    validation = lifecycle.start_validation(store, project.id)
    lifecycle.complete_validation(store, validation.id, _completion())
    with pytest.raises(ConflictError) as info:
        lifecycle.patch_validation(store, validation.id, ValidationPatch(status="in-progress"))
    assert info.value.code == "VALIDATION_STATUS_REGRESSION"
    assert lifecycle.get_validation(store, validation.id).status == ValidationStatus.COMPLETE


def test_patch_rejects_aggregates_while_in_progress(store, project):
    validation = lifecycle.start_validation(store, project.id)
    with pytest.raises(ConflictError) as info:
        lifecycle.patch_validation(store, validation.id, ValidationPatch(compliance_score=50))
    assert info.value.code == "VALIDATION_NOT_COMPLETE"


def test_patch_to_complete_stamps_completed_at(store, project):
    validation = lifecycle.start_validation(store, project.id)
    patched = lifecycle.patch_validation(
        store, validation.id, ValidationPatch(status="complete", compliance_score=70)
    )
    assert patched.status == ValidationStatus.COMPLETE
    assert patched.completed_at is not None
    assert patched.compliance_score == 70


def test_patch_keeps_explicit_completed_at(store, project):
    validation = lifecycle.start_validation(store, project.id)
    stamp = datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    patched = lifecycle.patch_validation(
        store, validation.id, ValidationPatch(status="complete", completed_at=stamp)
    )
    assert patched.completed_at == stamp


def test_patch_on_complete_validation_merges_fields(store, project):
    validation = lifecycle.start_validation(store, project.id)
    lifecycle.complete_validation(store, validation.id, _completion())
    patched = lifecycle.patch_validation(store, validation.id, ValidationPatch(compliance_score=91))
    assert patched.compliance_score == 91
    assert patched.compliant_elements == 23


def test_patch_with_null_status_is_invalid(store, project):
    validation = lifecycle.start_validation(store, project.id)
    with pytest.raises(InvalidInputError):
        lifecycle.patch_validation(store, validation.id, ValidationPatch.model_validate({"status": None}))


def test_patch_unknown_validation_is_not_found(store):
    with pytest.raises(NotFoundError):
        lifecycle.patch_validation(store, 9999, ValidationPatch(status="complete"))


def test_run_comparison_completes_with_collaborator_outcome(store, project):
    validation = lifecycle.start_validation(store, project.id)
    done = lifecycle.run_comparison(store, validation.id, CannedComparisonEngine())
    assert done.status == ValidationStatus.COMPLETE
    assert done.compliance_score == 87
    assert done.inconsistencies == len(done.results.inconsistencies)
    assert done.results.matched_elements


def test_run_comparison_failure_leaves_validation_in_progress(store, project, mocker):
    engine = mocker.Mock()
    engine.compare.side_effect = CollaboratorError("engine unreachable")
    validation = lifecycle.start_validation(store, project.id)

    with pytest.raises(UpstreamError) as info:
        lifecycle.run_comparison(store, validation.id, engine)

    assert "engine unreachable" in info.value.detail
    assert lifecycle.get_validation(store, validation.id).status == ValidationStatus.IN_PROGRESS


def test_listing_validations_is_scoped_to_project(store, project):
    other = create_project(store, ProjectCreate(name="Other"), default_owner_id=1)
    first = lifecycle.start_validation(store, project.id)
    lifecycle.start_validation(store, other.id)
    assert [v.id for v in lifecycle.list_validations(store, project.id)] == [first.id]
    with pytest.raises(NotFoundError):
        lifecycle.list_validations(store, 9999)
