"""
Route serving PDF receipts for payments on file.
"""
import logging
from io import BytesIO

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, StreamingResponse

from portal.core.errors import NotFoundError
from portal.routes.dependencies import error_response
from portal.services.receipt_service import receipt_for_payment


logger = logging.getLogger(__name__)

router = APIRouter(tags=["receipts"])


@router.get("/receipts/receipt-{payment_id}.pdf")
def download_receipt(payment_id: str):
    """
    Download the receipt linked from a payment's ``receiptUrl``.
    """
    try:
        pdf = receipt_for_payment(payment_id)
    except NotFoundError as exc:
        return error_response(exc)
    except Exception:
        logger.exception("Error generating receipt for payment %s", payment_id)
        return JSONResponse(
            {"error": "Failed to generate receipt"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return StreamingResponse(
        BytesIO(pdf),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=receipt-{payment_id}.pdf"},
    )
