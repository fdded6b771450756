"""
Read-only fixture data standing in for a real policy store.

Policies, payment history, claim history, the demo user and the support FAQ.
References between records are weak: a policy id may point to nothing.
"""
from __future__ import annotations

from typing import Final, List, Optional

from portal.schemas.portal_schema import (
    Claim,
    FAQItem,
    Payment,
    Policy,
    User,
)


MOCK_POLICIES: Final[List[Policy]] = [
    Policy(
        id="1",
        type="Auto Insurance",
        coverage="Comprehensive Coverage",
        premium=1200,
        start_date="2024-01-01",
        end_date="2024-12-31",
        status="active",
        policy_number="AUTO-2024-001",
    ),
    Policy(
        id="2",
        type="Home Insurance",
        coverage="Full Coverage",
        premium=800,
        start_date="2024-03-15",
        end_date="2025-03-14",
        status="active",
        policy_number="HOME-2024-002",
    ),
    Policy(
        id="3",
        type="Health Insurance",
        coverage="Premium Plan",
        premium=2400,
        start_date="2023-12-01",
        end_date="2024-11-30",
        status="pending",
        policy_number="HEALTH-2023-003",
    ),
]

MOCK_PAYMENTS: Final[List[Payment]] = [
    Payment(
        id="1",
        policy_id="1",
        amount=1200,
        payment_date="2024-01-01",
        method="Credit Card",
        status="completed",
        receipt_url="/receipts/receipt-1.pdf",
    ),
    Payment(
        id="2",
        policy_id="2",
        amount=800,
        payment_date="2024-03-15",
        method="Bank Transfer",
        status="completed",
        receipt_url="/receipts/receipt-2.pdf",
    ),
    Payment(
        id="3",
        policy_id="3",
        amount=2400,
        payment_date="2024-11-01",
        method="Credit Card",
        status="pending",
        receipt_url="/receipts/receipt-3.pdf",
    ),
]

MOCK_CLAIMS: Final[List[Claim]] = [
    Claim(
        id="1",
        policy_id="1",
        description="Minor fender bender in parking lot",
        amount=1500,
        submission_date="2024-06-15",
        status="approved",
        documents=["accident-report.pdf", "photos.jpg"],
    ),
    Claim(
        id="2",
        policy_id="2",
        description="Water damage from burst pipe",
        amount=3200,
        submission_date="2024-08-20",
        status="under_review",
        documents=["damage-photos.jpg", "repair-estimate.pdf"],
    ),
    Claim(
        id="3",
        policy_id="3",
        description="Emergency room visit",
        amount=850,
        submission_date="2024-09-10",
        status="submitted",
        documents=["medical-bills.pdf"],
    ),
]

MOCK_USER: Final[User] = User(
    id="1",
    name="John Doe",
    email="john.doe@email.com",
    phone="+1 (555) 123-4567",
    address="123 Main St, Anytown, ST 12345",
)

FAQ_DATA: Final[List[FAQItem]] = [
    FAQItem(
        question="How do I file a claim?",
        answer=(
            "You can file a claim by visiting the Claims section in your dashboard. "
            "Fill out the claim form with details about the incident and upload any "
            "supporting documents or photos."
        ),
    ),
    FAQItem(
        question="When is my premium due?",
        answer=(
            "Premium due dates vary by policy. You can check your specific due dates "
            "in the Policy Dashboard or Payment History section."
        ),
    ),
    FAQItem(
        question="How can I update my personal information?",
        answer=(
            "Currently, personal information updates require contacting our customer "
            "service team. We are working on adding self-service options in future updates."
        ),
    ),
    FAQItem(
        question="What payment methods do you accept?",
        answer=(
            "We accept major credit cards (Visa, MasterCard, American Express), debit "
            "cards, and bank transfers for premium payments."
        ),
    ),
    FAQItem(
        question="How long does claim processing take?",
        answer=(
            "Claim processing typically takes 5-10 business days for simple claims and "
            "up to 30 days for complex claims requiring investigation."
        ),
    ),
]


def _validate_id(record_id: str, *, field_label: str = "id") -> str:
    """
    Validate and normalize a record identifier.

    Raises:
        ValueError: If the id is not a non-empty string.
    """
    if not isinstance(record_id, str):
        raise ValueError(f"{field_label} must be a string")

    normalized = record_id.strip()
    if not normalized:
        raise ValueError(f"{field_label} cannot be empty")

    return normalized


def get_policy(policy_id: str) -> Optional[Policy]:
    """
    Look up a policy fixture by id.

    Returns:
        The matching Policy, or None if no fixture has that id.

    Raises:
        ValueError: If policy_id is invalid.
    """
    normalized = _validate_id(policy_id, field_label="policy_id")
    return next((p for p in MOCK_POLICIES if p.id == normalized), None)


def get_payment(payment_id: str) -> Optional[Payment]:
    normalized = _validate_id(payment_id, field_label="payment_id")
    return next((p for p in MOCK_PAYMENTS if p.id == normalized), None)


def get_claims_for_policy(policy_id: str) -> List[Claim]:
    normalized = _validate_id(policy_id, field_label="policy_id")
    return [c for c in MOCK_CLAIMS if c.policy_id == normalized]


__all__ = [
    "MOCK_POLICIES",
    "MOCK_PAYMENTS",
    "MOCK_CLAIMS",
    "MOCK_USER",
    "FAQ_DATA",
    "get_policy",
    "get_payment",
    "get_claims_for_policy",
]
