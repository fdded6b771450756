"""
Read-only views over the fixture data for the dashboard, payment and claims pages.
"""
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from portal.core.errors import NotFoundError
from portal.core.mock_data import (
    MOCK_CLAIMS,
    MOCK_PAYMENTS,
    MOCK_POLICIES,
    get_claims_for_policy,
    get_policy,
)
from portal.schemas.portal_schema import (
    Claim,
    ClaimHistoryEntry,
    ClaimProgressStep,
    ClaimStatus,
    DashboardSummary,
    PaymentHistoryEntry,
    Policy,
    PolicyStatus,
)


CLAIM_PROGRESS: Dict[ClaimStatus, int] = {
    ClaimStatus.SUBMITTED: 25,
    ClaimStatus.UNDER_REVIEW: 50,
    ClaimStatus.APPROVED: 100,
    ClaimStatus.REJECTED: 100,
}


def format_currency(amount: float) -> str:
    """Format an amount as US dollars, e.g. ``$4,400.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: date) -> str:
    """Long US date, e.g. ``January 1, 2024``."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def build_summary(policies: List[Policy]) -> DashboardSummary:
    total = float(sum(p.premium for p in policies))
    return DashboardSummary(
        active_policies=sum(1 for p in policies if p.status == PolicyStatus.ACTIVE),
        pending_policies=sum(1 for p in policies if p.status == PolicyStatus.PENDING),
        total_annual_premium=total,
        total_annual_premium_display=format_currency(total),
    )


def list_policies() -> List[Policy]:
    return list(MOCK_POLICIES)


def get_policy_detail(policy_id: str) -> Dict[str, object]:
    """
    A policy with the claims filed against it.

    Raises:
        NotFoundError: If no policy has this id.
    """
    try:
        policy = get_policy(policy_id)
    except ValueError as exc:
        raise NotFoundError(f"Policy {policy_id} not found") from exc
    if policy is None:
        raise NotFoundError(f"Policy {policy_id} not found")
    return {"policy": policy, "claims": get_claims_for_policy(policy.id)}


def claim_progress_steps(status: ClaimStatus) -> List[ClaimProgressStep]:
    """
    The three-step progress tracker shown next to each claim.

    The last step is labelled with the outcome once one exists.
    """
    if status == ClaimStatus.APPROVED:
        final_label = "Approved"
    elif status == ClaimStatus.REJECTED:
        final_label = "Rejected"
    else:
        final_label = "Processing"
    return [
        ClaimProgressStep(label="Submitted", completed=True),
        ClaimProgressStep(label="Under Review", completed=status != ClaimStatus.SUBMITTED),
        ClaimProgressStep(
            label=final_label,
            completed=status in (ClaimStatus.APPROVED, ClaimStatus.REJECTED),
        ),
    ]


def _policy_labels(policy_id: str) -> Dict[str, Optional[str]]:
    policy = get_policy(policy_id)
    if policy is None:
        return {"policy_number": None, "policy_type": None}
    return {"policy_number": policy.policy_number, "policy_type": policy.type}


def claim_history(claims: Optional[List[Claim]] = None) -> List[ClaimHistoryEntry]:
    """Claims joined with their policy and progress; missing policies yield None labels."""
    entries = []
    for claim in MOCK_CLAIMS if claims is None else claims:
        entries.append(
            ClaimHistoryEntry(
                claim=claim,
                progress=CLAIM_PROGRESS.get(claim.status, 0),
                steps=claim_progress_steps(claim.status),
                **_policy_labels(claim.policy_id),
            )
        )
    return entries


def payment_history() -> List[PaymentHistoryEntry]:
    return [
        PaymentHistoryEntry(payment=payment, **_policy_labels(payment.policy_id))
        for payment in MOCK_PAYMENTS
    ]


def payment_prefill(policy_id: str) -> Dict[str, object]:
    """
    Pre-populate the payment form with the policy's premium.

    Raises:
        NotFoundError: If no policy has this id.
    """
    policy = get_policy(policy_id)
    if policy is None:
        raise NotFoundError(f"Policy {policy_id} not found")
    return {"policyId": policy.id, "amount": policy.premium}


__all__ = [
    "format_currency",
    "format_date",
    "build_summary",
    "list_policies",
    "get_policy_detail",
    "claim_progress_steps",
    "claim_history",
    "payment_history",
    "payment_prefill",
    "CLAIM_PROGRESS",
]
