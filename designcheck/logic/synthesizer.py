"""Test-case synthesis from a validation's comparison results.

Each recorded inconsistency becomes one test case:

- code ``TC-<validation id>-<n>`` with a 1-based ``n``
- name ``"Verify " + inconsistency name``, description copied verbatim
- severity from the inconsistency status (Missing: High, Partial: Medium,
  anything else: Low)
- type from keywords in the name ("validation"/"process": Functional,
  "accessibility": Accessibility, otherwise UI)
- status Passed or Failed by an unweighted draw
- requirement and design element ids copied through, or ``REQ-<nnn>`` and
  ``DE-<nnn>`` placeholders

With no inconsistencies, 6 to 10 filler cases are drawn from the catalog in
`synthesis_catalog`. All randomness comes from the `random.Random` passed in.

Generation replaces every earlier test case of the validation. Unless
disabled, it also re-stamps the validation with the fixed demonstration
aggregates (`DEMO_SNAPSHOT`), regardless of what was generated.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List

from designcheck.logic.collections import utcnow
from designcheck.logic.comparison import CANNED_INCONSISTENCIES
from designcheck.logic.errors import ConflictError
from designcheck.logic.events import TEST_CASES_GENERATED, publish
from designcheck.logic.lifecycle import get_validation
from designcheck.logic.store import EntityStore
from designcheck.logic.synthesis_catalog import DESIGN_ELEMENTS, TEST_CASE_TEMPLATES
from designcheck.models.entities import (
    Inconsistency,
    TestCase,
    TestCaseSeverity,
    TestCaseStatus,
    TestCaseType,
    Validation,
    ValidationResults,
    ValidationStatus,
)

logger = logging.getLogger(__name__)

FALLBACK_MIN = 6
FALLBACK_MAX = 10

SEVERITY_BY_STATUS = {
    "Missing": TestCaseSeverity.HIGH,
    "Partial": TestCaseSeverity.MEDIUM,
}

OUTCOME_STATUSES = (TestCaseStatus.PASSED, TestCaseStatus.FAILED)
FALLBACK_STATUSES = (TestCaseStatus.FAILED, TestCaseStatus.PASSED, TestCaseStatus.IN_PROGRESS)
FALLBACK_TYPES = (
    TestCaseType.UI,
    TestCaseType.FUNCTIONAL,
    TestCaseType.UX,
    TestCaseType.ACCESSIBILITY,
    TestCaseType.VISUAL,
)
FALLBACK_SEVERITIES = (TestCaseSeverity.HIGH, TestCaseSeverity.MEDIUM, TestCaseSeverity.LOW)

DEMO_SNAPSHOT: Dict[str, Any] = {
    "compliance_score": 87,
    "compliant_elements": 23,
    "inconsistencies": 4,
}


def severity_for(status: str) -> TestCaseSeverity:
    return SEVERITY_BY_STATUS.get(status, TestCaseSeverity.LOW)


def classify_type(name: str) -> TestCaseType:
    lowered = (name or "").lower()
    if "validation" in lowered or "process" in lowered:
        return TestCaseType.FUNCTIONAL
    if "accessibility" in lowered:
        return TestCaseType.ACCESSIBILITY
    return TestCaseType.UI


def format_case_code(validation_id: int, index: int) -> str:
    return f"TC-{validation_id}-{index}"


def _from_inconsistency(
    validation_id: int, index: int, item: Inconsistency, rng: random.Random
) -> Dict[str, Any]:
    return {
        "validation_id": validation_id,
        "test_case_id": format_case_code(validation_id, index),
        "name": f"Verify {item.name}",
        "description": item.description,
        "type": classify_type(item.name),
        "severity": severity_for(item.status),
        "status": rng.choice(OUTCOME_STATUSES),
        "requirement": item.requirement_id or f"REQ-{index:03d}",
        "design_element": item.design_element_id or f"DE-{index:03d}",
    }


def _filler(validation_id: int, index: int, rng: random.Random) -> Dict[str, Any]:
    case_type = rng.choice(FALLBACK_TYPES)
    severity = rng.choice(FALLBACK_SEVERITIES)
    status = rng.choice(FALLBACK_STATUSES)
    templates = TEST_CASE_TEMPLATES[case_type]
    elements = DESIGN_ELEMENTS[case_type]
    name, description = templates[(index - 1) % len(templates)]
    return {
        "validation_id": validation_id,
        "test_case_id": format_case_code(validation_id, index),
        "name": name,
        "description": description,
        "type": case_type,
        "severity": severity,
        "status": status,
        "requirement": f"REQ-{100 + index}",
        "design_element": elements[(index - 1) % len(elements)],
    }


def synthesize_test_cases(validation: Validation, rng: random.Random) -> List[Dict[str, Any]]:
    """Return ordered test-case creation payloads for `validation`."""
    inconsistencies = validation.results.inconsistencies if validation.results else []
    payloads = [
        _from_inconsistency(validation.id, index, item, rng)
        for index, item in enumerate(inconsistencies, start=1)
    ]
    if payloads:
        return payloads
    count = rng.randint(FALLBACK_MIN, FALLBACK_MAX)
    return [_filler(validation.id, index, rng) for index in range(1, count + 1)]


def demo_snapshot() -> Dict[str, Any]:
    return {
        **DEMO_SNAPSHOT,
        "status": ValidationStatus.COMPLETE,
        "completed_at": utcnow(),
        "results": ValidationResults(inconsistencies=[item.model_copy() for item in CANNED_INCONSISTENCIES]),
    }


def generate_test_cases(
    store: EntityStore,
    validation_id: int,
    rng: random.Random,
    *,
    restamp: bool = True,
) -> List[TestCase]:
    with store.atomic():
        validation = get_validation(store, validation_id)
        if not restamp and not validation.is_complete:
            raise ConflictError(
                f"Validation {validation_id} must be complete before generating test cases",
                code="VALIDATION_NOT_COMPLETE",
            )
        payloads = synthesize_test_cases(validation, rng)
        removed = 0
        for existing in store.test_cases.list(validation_id):
            removed += int(store.test_cases.delete(existing.id))
        created = [store.test_cases.create(payload) for payload in payloads]
        if restamp:
            store.validations.update(validation_id, demo_snapshot())
    publish(
        TEST_CASES_GENERATED,
        {"validation_id": validation_id, "created": len(created), "replaced": removed, "restamped": restamp},
    )
    return created


__all__ = [
    "DEMO_SNAPSHOT",
    "severity_for",
    "classify_type",
    "format_case_code",
    "synthesize_test_cases",
    "generate_test_cases",
]
