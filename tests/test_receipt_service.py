import pytest

from portal.core.errors import NotFoundError
from portal.core.mock_data import MOCK_PAYMENTS
from portal.schemas.portal_schema import Payment
from portal.services.receipt_service import receipt_for_payment, render_receipt


def test_receipt_for_payment_is_a_pdf():
    pdf = receipt_for_payment("1")
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500


def test_receipt_for_unknown_payment():
    with pytest.raises(NotFoundError):
        receipt_for_payment("1700000000000")


@pytest.mark.parametrize("payment_id", ["", " "])
def test_receipt_for_blank_payment_id(payment_id):
    with pytest.raises(NotFoundError):
        receipt_for_payment(payment_id)


def test_render_receipt_without_policy():
    orphan = Payment(
        id="7",
        policy_id="gone",
        amount=10,
        payment_date="2024-05-05",
        method="Debit Card",
        status="failed",
        receipt_url="/receipts/receipt-7.pdf",
    )
    assert render_receipt(orphan).startswith(b"%PDF")
    assert render_receipt(MOCK_PAYMENTS[2], None).startswith(b"%PDF")
