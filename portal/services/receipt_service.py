"""
PDF receipts for premium payments, rendered with reportlab.
"""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from portal.core.errors import NotFoundError
from portal.core.mock_data import get_payment, get_policy
from portal.schemas.portal_schema import Payment, Policy
from portal.services.dashboard_service import format_currency, format_date


logger = logging.getLogger(__name__)

BRAND_COLOR = colors.HexColor("#2563eb")


def render_receipt(payment: Payment, policy: Optional[Policy] = None) -> bytes:
    """
    Build a one-page receipt PDF for a payment.

    Args:
        payment: The payment to describe.
        policy: The policy it was made against, if it still exists.

    Returns:
        The PDF document as bytes.
    """
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=(8.5 * inch, 11 * inch))
    styles = getSampleStyleSheet()
    elements = []

    title_style = ParagraphStyle(
        "ReceiptTitle",
        parent=styles["Heading1"],
        fontSize=24,
        textColor=BRAND_COLOR,
        spaceAfter=30,
        alignment=1,
    )
    elements.append(Paragraph("SecureInsure", title_style))
    elements.append(Paragraph("Premium Payment Receipt", styles["Heading2"]))
    elements.append(Spacer(1, 0.3 * inch))

    table_data = [
        ["Receipt #", payment.id],
        ["Payment Date", format_date(payment.payment_date)],
        ["Amount", format_currency(payment.amount)],
        ["Method", payment.method],
        ["Status", payment.status.value.title()],
        ["Policy Number", policy.policy_number if policy else "N/A"],
        ["Policy Type", policy.type if policy else "N/A"],
    ]
    table = Table(table_data, colWidths=[2 * inch, 4 * inch])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (0, -1), BRAND_COLOR),
        ("TEXTCOLOR", (0, 0), (0, -1), colors.whitesmoke),
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 1, colors.black),
    ]))
    elements.append(table)
    elements.append(Spacer(1, 0.3 * inch))

    elements.append(Paragraph("Thank you for your payment.", styles["Normal"]))

    doc.build(elements)
    return buffer.getvalue()


def receipt_for_payment(payment_id: str) -> bytes:
    """
    Render the receipt for a payment on file.

    Raises:
        NotFoundError: If the payment is unknown.
    """
    try:
        payment = get_payment(payment_id)
    except ValueError as exc:
        raise NotFoundError(f"Receipt for payment {payment_id} not found") from exc
    if payment is None:
        raise NotFoundError(f"Receipt for payment {payment_id} not found")
    logger.info("Rendering receipt for payment %s", payment.id)
    return render_receipt(payment, get_policy(payment.policy_id))


__all__ = ["render_receipt", "receipt_for_payment"]
