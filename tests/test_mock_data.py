import pytest

from portal.core.mock_data import (
    FAQ_DATA,
    MOCK_CLAIMS,
    MOCK_PAYMENTS,
    MOCK_POLICIES,
    MOCK_USER,
    get_claims_for_policy,
    get_payment,
    get_policy,
)
from portal.schemas.portal_schema import ClaimStatus, PaymentStatus, PolicyStatus


def test_get_policy_found():
    auto = get_policy("1")
    assert auto is not None
    assert auto.policy_number == "AUTO-2024-001"
    assert auto.premium == 1200
    assert auto.status == PolicyStatus.ACTIVE

    health = get_policy("3")
    assert health is not None
    assert health.status == PolicyStatus.PENDING


def test_get_policy_not_found():
    assert get_policy("99") is None
    assert get_policy("AUTO-2024-001") is None


@pytest.mark.parametrize("invalid_input", ["", "   ", None, 123])
def test_get_policy_invalid_input(invalid_input):
    with pytest.raises(ValueError):
        get_policy(invalid_input)  # type: ignore[arg-type]


def test_get_payment():
    payment = get_payment("2")
    assert payment is not None
    assert payment.method == "Bank Transfer"
    assert payment.receipt_url == "/receipts/receipt-2.pdf"
    assert get_payment("42") is None


def test_get_claims_for_policy():
    claims = get_claims_for_policy("2")
    assert [c.id for c in claims] == ["2"]
    assert claims[0].status == ClaimStatus.UNDER_REVIEW
    assert get_claims_for_policy("404") == []


def test_fixture_structure():
    assert len(MOCK_POLICIES) == 3
    assert len(MOCK_PAYMENTS) == 3
    assert len(MOCK_CLAIMS) == 3
    assert len(FAQ_DATA) == 5
    assert MOCK_USER.name == "John Doe"

    for payment in MOCK_PAYMENTS:
        assert isinstance(payment.status, PaymentStatus)
    for claim in MOCK_CLAIMS:
        assert claim.documents


def test_wire_format_uses_camel_case():
    wire = MOCK_PAYMENTS[0].to_wire()
    assert wire == {
        "id": "1",
        "policyId": "1",
        "amount": 1200.0,
        "date": "2024-01-01",
        "method": "Credit Card",
        "status": "completed",
        "receiptUrl": "/receipts/receipt-1.pdf",
    }
