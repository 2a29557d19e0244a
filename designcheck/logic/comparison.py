"""Requirement-to-design comparison collaborator.

Real requirement/design matching is external. `CannedComparisonEngine`
returns the fixed demonstration outcome so the lifecycle can be exercised
end to end; any object with a matching `compare()` can replace it on
`app.state.comparison_engine`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from designcheck.models.entities import DesignReference, Inconsistency, MatchedElement, ValidationResults


@dataclass
class ComparisonOutcome:
    compliance_score: int
    compliant_elements: int
    results: ValidationResults

    @property
    def inconsistency_count(self) -> int:
        return len(self.results.inconsistencies)


CANNED_INCONSISTENCIES = [
    Inconsistency(
        name="Login Form Field Validation",
        status="Missing",
        description="SRS specifies email validation messaging that is not present in the design",
        requirement_id="REQ-001",
    ),
    Inconsistency(
        name="Product Filter Options",
        status="Partial",
        description="SRS specifies 5 filter categories, design only shows 3",
        requirement_id="REQ-002",
    ),
    Inconsistency(
        name="Checkout Process Steps",
        status="Mismatch",
        description="SRS specifies 4-step checkout, design shows 3-step process",
        requirement_id="REQ-003",
        design_element_id="checkout-flow",
    ),
]

CANNED_MATCHES = [
    MatchedElement(requirement_id="REQ-001", design_element_id="email-field", match=75),
    MatchedElement(requirement_id="REQ-002", design_element_id="filters", match=60),
    MatchedElement(requirement_id="REQ-003", design_element_id="checkout-flow", match=75),
    MatchedElement(requirement_id="REQ-004", design_element_id="payment", match=100),
    MatchedElement(requirement_id="REQ-005", design_element_id="user-profile", match=90),
]


class CannedComparisonEngine:
    def compare(
        self, requirements: List[Dict[str, Any]], design_references: List[DesignReference]
    ) -> ComparisonOutcome:
        return ComparisonOutcome(
            compliance_score=87,
            compliant_elements=23,
            results=ValidationResults(
                inconsistencies=[item.model_copy() for item in CANNED_INCONSISTENCIES],
                matched_elements=[item.model_copy() for item in CANNED_MATCHES],
            ),
        )


__all__ = ["ComparisonOutcome", "CannedComparisonEngine", "CANNED_INCONSISTENCIES", "CANNED_MATCHES"]
