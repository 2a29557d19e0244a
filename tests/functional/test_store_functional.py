"""Entity store contract, exercised on both storage backends."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from designcheck.logic.store import EntityStore
from designcheck.models.entities import ValidationStatus


def _project(store: EntityStore, name: str = "P", user_id: int = 1):
    return store.projects.create({"name": name, "user_id": user_id})


def _document(store: EntityStore, project_id: int, name: str = "srs.pdf"):
    return store.documents.create(
        {
            "project_id": project_id,
            "name": name,
            "original_filename": name,
            "file_size": 2048,
            "file_type": "application/pdf",
        }
    )


def test_identifiers_are_distinct_and_strictly_increasing(store):
    created = [_project(store, f"P{i}") for i in range(5)]
    ids = [p.id for p in created]
    assert len(set(ids)) == 5
    assert ids == sorted(ids)
    assert all(b > a for a, b in zip(ids, ids[1:]))


def test_identifiers_are_never_reused_after_delete(store):
    first = _project(store, "first")
    second = _project(store, "second")
    assert store.projects.delete(second.id) is True
    third = _project(store, "third")
    assert third.id > second.id > first.id


def test_each_kind_counts_independently(store):
    project = _project(store)
    document = _document(store, project.id)
    validation = store.validations.create({"project_id": project.id, "status": "in-progress"})
    assert project.id == 1
    assert document.id == 1
    assert validation.id == 1


def test_create_is_immediately_visible(store):
    project = _project(store, "visible")
    assert store.projects.get(project.id) == project
    assert [p.id for p in store.projects.list(1)] == [project.id]


def test_list_filters_by_owner_only(store):
    alpha = _project(store, "alpha")
    beta = _project(store, "beta")
    a_docs = [_document(store, alpha.id, f"a{i}.pdf") for i in range(3)]
    _document(store, beta.id, "b.pdf")

    listed = store.documents.list(alpha.id)
    assert [d.id for d in listed] == [d.id for d in a_docs]
    assert all(d.project_id == alpha.id for d in listed)
    assert store.documents.list(999) == []
    assert len(store.documents.list()) == 4


def test_unknown_identifier_returns_not_found_signal(store):
    assert store.projects.get(404) is None
    assert store.projects.update(404, {"name": "x"}) is None
    assert store.projects.delete(404) is False


def test_update_merges_partial_payload_and_refreshes_updated_at(store):
    project = _project(store, "before")
    updated = store.projects.update(project.id, {"description": "added"})
    assert updated.name == "before"
    assert updated.description == "added"
    assert updated.updated_at >= project.updated_at
    assert store.projects.get(project.id).description == "added"


def test_document_starts_without_parsed_content(store):
    project = _project(store)
    document = _document(store, project.id)
    assert document.content is None
    assert document.extracted_requirements is None

    parsed = store.documents.update(
        document.id, {"content": "text", "extracted_requirements": {"requirements": [{"id": "REQ-1"}]}}
    )
    assert parsed.content == "text"
    assert store.documents.get(document.id).extracted_requirements == {"requirements": [{"id": "REQ-1"}]}


def test_validation_defaults_and_json_results_round_trip(store):
    project = _project(store)
    validation = store.validations.create({"project_id": project.id, "status": "in-progress"})
    assert validation.status == ValidationStatus.IN_PROGRESS
    assert validation.results is None
    assert validation.compliance_score is None

    store.validations.update(
        validation.id,
        {
            "status": "complete",
            "compliance_score": 90,
            "results": {"inconsistencies": [{"name": "Nav", "status": "Missing", "description": "d"}]},
        },
    )
    stored = store.validations.get(validation.id)
    assert stored.status == ValidationStatus.COMPLETE
    assert stored.results.inconsistencies[0].name == "Nav"


def test_returned_entities_are_detached_from_storage(store):
    project = _project(store)
    validation = store.validations.create(
        {
            "project_id": project.id,
            "status": "complete",
            "results": {"inconsistencies": [{"name": "A", "status": "Missing"}]},
        }
    )
    validation.results.inconsistencies.clear()
    assert len(store.validations.get(validation.id).results.inconsistencies) == 1


def test_find_matches_on_field_equality(store):
    store.users.create({"username": "ana", "password": "pw", "email": "ana@example.com"})
    store.users.create({"username": "bo", "password": "pw", "email": "bo@example.com"})
    assert [u.username for u in store.users.find(email="bo@example.com")] == ["bo"]
    assert store.users.find(username="nobody") == []


def test_demo_seed_is_idempotent(store):
    from designcheck.logic.seed import DEMO_PROJECTS, seed_demo_data

    first = seed_demo_data(store)
    second = seed_demo_data(store)
    assert first == second
    assert len(store.users.list()) == 1
    assert [p.name for p in store.projects.list(first)] == [p["name"] for p in DEMO_PROJECTS]


def test_offset_timestamps_keep_their_instant(store):
    project = _project(store)
    validation = store.validations.create({"project_id": project.id, "status": "in-progress"})
    local = datetime(2024, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=5)))

    updated = store.validations.update(validation.id, {"status": "complete", "completed_at": local})
    stored = store.validations.get(validation.id)

    expected = datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)
    assert updated.completed_at == expected
    assert stored.completed_at == expected
    assert stored.completed_at.utcoffset() == timedelta(0)
