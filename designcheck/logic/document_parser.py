"""Requirement document parser collaborator.

The real text and requirement extraction (PDF, DOCX) is an external
collaborator. `CannedDocumentParser` stands in for it: plain text is decoded
as-is, other formats get a placeholder body, and the extracted requirements
are a fixed five-entry list. Replace it by assigning another object with the
same `parse()` signature to `app.state.document_parser`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

from designcheck.logic.errors import CollaboratorError

PLACEHOLDER_CONTENT = "Sample document content"

SAMPLE_REQUIREMENTS: List[Dict[str, str]] = [
    {
        "id": "REQ-001",
        "category": "Authentication",
        "text": "The system shall validate email addresses to ensure they follow the format user@domain.tld and display appropriate error messages.",
        "priority": "High",
    },
    {
        "id": "REQ-002",
        "category": "Product Listing",
        "text": "The product listing page shall provide filtering options for category, price range, brand, rating, and availability.",
        "priority": "Medium",
    },
    {
        "id": "REQ-003",
        "category": "Checkout",
        "text": "The checkout process shall follow a 4-step workflow: cart review, shipping information, payment method, and order confirmation.",
        "priority": "High",
    },
    {
        "id": "REQ-004",
        "category": "Payment",
        "text": "The system shall support multiple payment methods including credit cards, PayPal, Apple Pay, and Google Pay.",
        "priority": "High",
    },
    {
        "id": "REQ-005",
        "category": "User Profile",
        "text": "Users shall be able to view and edit their profile information, including name, email, phone number, and address.",
        "priority": "Medium",
    },
]


@dataclass
class ParsedDocument:
    content: str
    extracted_requirements: Dict[str, Any] = field(default_factory=dict)


class CannedDocumentParser:
    def parse(self, filename: str, mime_type: str, data: bytes) -> ParsedDocument:
        if mime_type == "text/plain":
            try:
                content = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise CollaboratorError(f"text document is not valid UTF-8: {exc}") from exc
        else:
            content = PLACEHOLDER_CONTENT
        metadata = {
            "title": os.path.splitext(filename)[0],
            "size": len(data),
            "type": mime_type,
        }
        return ParsedDocument(
            content=content,
            extracted_requirements={
                "requirements": [dict(item) for item in SAMPLE_REQUIREMENTS],
                "document_metadata": metadata,
            },
        )


__all__ = ["ParsedDocument", "CannedDocumentParser", "SAMPLE_REQUIREMENTS", "PLACEHOLDER_CONTENT"]
