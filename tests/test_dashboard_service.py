from datetime import date

import pytest

from portal.core.errors import NotFoundError
from portal.core.mock_data import MOCK_POLICIES
from portal.schemas.portal_schema import Claim, ClaimStatus
from portal.services.dashboard_service import (
    build_summary,
    claim_history,
    claim_progress_steps,
    format_currency,
    format_date,
    get_policy_detail,
    payment_history,
    payment_prefill,
)


def test_build_summary():
    summary = build_summary(MOCK_POLICIES)
    assert summary.active_policies == 2
    assert summary.pending_policies == 1
    assert summary.total_annual_premium == 4400.0
    assert summary.total_annual_premium_display == "$4,400.00"


def test_build_summary_empty():
    summary = build_summary([])
    assert summary.active_policies == 0
    assert summary.total_annual_premium_display == "$0.00"


@pytest.mark.parametrize(
    "amount, expected",
    [(0, "$0.00"), (850, "$850.00"), (1234567.891, "$1,234,567.89"), (-12.5, "-$12.50")],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date():
    assert format_date(date(2024, 1, 1)) == "January 1, 2024"
    assert format_date(date(2025, 3, 14)) == "March 14, 2025"


@pytest.mark.parametrize(
    "status, labels, completed",
    [
        (ClaimStatus.SUBMITTED, ["Submitted", "Under Review", "Processing"], [True, False, False]),
        (ClaimStatus.UNDER_REVIEW, ["Submitted", "Under Review", "Processing"], [True, True, False]),
        (ClaimStatus.APPROVED, ["Submitted", "Under Review", "Approved"], [True, True, True]),
        (ClaimStatus.REJECTED, ["Submitted", "Under Review", "Rejected"], [True, True, True]),
    ],
)
def test_claim_progress_steps(status, labels, completed):
    steps = claim_progress_steps(status)
    assert [s.label for s in steps] == labels
    assert [s.completed for s in steps] == completed


def test_claim_history_joins_policy_and_progress():
    entries = {e.claim.id: e for e in claim_history()}
    assert entries["1"].progress == 100
    assert entries["1"].policy_number == "AUTO-2024-001"
    assert entries["2"].progress == 50
    assert entries["3"].progress == 25
    assert entries["3"].policy_type == "Health Insurance"


def test_claim_history_tolerates_dangling_policy_reference():
    orphan = Claim(
        id="9",
        policy_id="missing",
        description="Stolen bicycle",
        amount=300,
        submission_date="2024-10-01",
        status="submitted",
    )
    entry = claim_history([orphan])[0]
    assert entry.policy_number is None
    assert entry.policy_type is None


def test_payment_history():
    entries = payment_history()
    assert [e.payment.id for e in entries] == ["1", "2", "3"]
    assert entries[1].policy_number == "HOME-2024-002"
    assert entries[1].to_wire()["payment"]["receiptUrl"] == "/receipts/receipt-2.pdf"


def test_get_policy_detail():
    detail = get_policy_detail("1")
    assert detail["policy"].policy_number == "AUTO-2024-001"
    assert [c.id for c in detail["claims"]] == ["1"]

    with pytest.raises(NotFoundError):
        get_policy_detail("99")


@pytest.mark.parametrize("policy_id", ["", "   "])
def test_get_policy_detail_blank_id_is_not_found(policy_id):
    with pytest.raises(NotFoundError):
        get_policy_detail(policy_id)


def test_payment_prefill():
    assert payment_prefill("2") == {"policyId": "2", "amount": 800.0}
    with pytest.raises(NotFoundError):
        payment_prefill("99")
