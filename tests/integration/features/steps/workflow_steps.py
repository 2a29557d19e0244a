"""Step definitions for the validation workflow feature.

Steps talk to the API only through `context.client`, so the same scenarios
run in-process or against a live server (see ../environment.py).
"""

from __future__ import annotations

from typing import Any, Dict, List

from behave import given, then, when


def _url(context, path: str) -> str:
    return f"{context.api_prefix}{path}"


def _expand(context, text: str) -> str:
    return text.replace("{vid}", str(context.vars.get("validation_id", "")))


def _json(context) -> Any:
    response = context.last_response
    assert response is not None, "no request has been made yet"
    return response.json()


def _table_rows(context) -> List[Dict[str, str]]:
    return [{heading: row[heading] for heading in context.table.headings} for row in context.table]


# ------------------
# Setup
# ------------------


@given('a project named "{name}" exists')
def step_project_exists(context, name: str) -> None:
    response = context.client.post(_url(context, "/projects"), json={"name": name})
    assert response.status_code == 201, response.text
    context.vars["project_id"] = response.json()["id"]


@given("a validation has been started")
def step_validation_started(context) -> None:
    pid = context.vars["project_id"]
    response = context.client.post(_url(context, f"/projects/{pid}/validations"))
    assert response.status_code == 201, response.text
    assert response.json()["status"] == "in-progress"
    context.vars["validation_id"] = response.json()["id"]


# ------------------
# Actions
# ------------------


@when('I register design reference "{name}" with URL "{url}"')
def step_register_design_reference(context, name: str, url: str) -> None:
    pid = context.vars["project_id"]
    context.last_response = context.client.post(
        _url(context, f"/projects/{pid}/design-references"), json={"name": name, "file_url": url}
    )


@when('I upload "{filename}" as "{mime_type}" containing "{text}"')
def step_upload_document(context, filename: str, mime_type: str, text: str) -> None:
    pid = context.vars["project_id"]
    context.last_response = context.client.post(
        _url(context, f"/projects/{pid}/documents/upload"),
        files={"file": (filename, text.encode("utf-8"), mime_type)},
    )


@when("the validation is completed with these inconsistencies:")
def step_complete_validation(context) -> None:
    vid = context.vars["validation_id"]
    context.last_response = context.client.post(
        _url(context, f"/validations/{vid}/complete"),
        json={
            "compliance_score": 75,
            "compliant_elements": 18,
            "results": {"inconsistencies": _table_rows(context)},
        },
    )


@when("I generate test cases")
def step_generate(context) -> None:
    vid = context.vars["validation_id"]
    context.last_response = context.client.post(_url(context, f"/validations/{vid}/test-cases/generate"))


@when("I generate test cases for validation {vid:d}")
def step_generate_for(context, vid: int) -> None:
    context.last_response = context.client.post(_url(context, f"/validations/{vid}/test-cases/generate"))


@when('I export the test cases as "{fmt}"')
def step_export(context, fmt: str) -> None:
    vid = context.vars["validation_id"]
    context.last_response = context.client.post(
        _url(context, f"/validations/{vid}/test-cases/export"), json={"format": fmt}
    )


# ------------------
# Assertions
# ------------------


@then("the response status is {status:d}")
def step_status(context, status: int) -> None:
    response = context.last_response
    assert response.status_code == status, f"expected {status}, got {response.status_code}: {response.text}"


@then("the response is a problem document")
def step_problem_document(context) -> None:
    assert context.last_response.headers["content-type"].startswith("application/problem+json")
    body = _json(context)
    assert body["status"] == context.last_response.status_code


@then('the problem code is "{code}"')
def step_problem_code(context, code: str) -> None:
    assert _json(context)["code"] == code


@then('the design reference key is "{key}"')
def step_design_key(context, key: str) -> None:
    assert _json(context)["file_key"] == key


@then("the design reference key is empty")
def step_design_key_empty(context) -> None:
    assert _json(context)["file_key"] is None


@then('the document content is "{text}"')
def step_document_content(context, text: str) -> None:
    assert _json(context)["content"] == text


@then("the document lists {count:d} extracted requirements")
def step_document_requirements(context, count: int) -> None:
    assert len(_json(context)["extracted_requirements"]["requirements"]) == count


@then('the validation status is "{status}"')
def step_validation_status(context, status: str) -> None:
    vid = context.vars["validation_id"]
    response = context.client.get(_url(context, f"/validations/{vid}"))
    assert response.status_code == 200, response.text
    assert response.json()["status"] == status


@then("the generated test cases are:")
def step_generated_cases(context) -> None:
    cases = _json(context)
    expected = _table_rows(context)
    assert len(cases) == len(expected), cases
    for case, row in zip(cases, expected):
        for field, value in row.items():
            assert case[field] == _expand(context, value), f"{field}: {case[field]!r} != {value!r}"


@then('the export file name is "{file_name}"')
def step_export_file_name(context, file_name: str) -> None:
    assert _json(context)["file_name"] == _expand(context, file_name)
