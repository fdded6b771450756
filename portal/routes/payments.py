"""
API routes for premium payments and payment history.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from portal.core.errors import NotFoundError, PaymentDeclinedError, PortalValidationError
from portal.routes.dependencies import error_response, get_payment_service, require_session
from portal.services.auth_service import AuthSession
from portal.services.dashboard_service import payment_history, payment_prefill
from portal.services.payment_service import PaymentService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payment", tags=["payments"])


@router.post("")
async def submit_payment(
    request: Request,
    payment_service: PaymentService = Depends(get_payment_service),
):
    """
    Process a premium payment from a JSON body.

    - Validation errors return HTTP 400
    - Simulated gateway declines return HTTP 402
    - Unexpected errors return HTTP 500
    """
    try:
        try:
            body = await request.json()
        except ValueError as exc:
            raise PortalValidationError("Invalid JSON body") from exc

        confirmation = await payment_service.process(body)
        return JSONResponse(confirmation.to_wire(), status_code=status.HTTP_200_OK)
    except PortalValidationError as exc:
        logger.warning("Validation error while processing payment: %s", exc)
        return error_response(exc)
    except PaymentDeclinedError as exc:
        return error_response(exc)
    except Exception:
        logger.exception("Payment processing error")
        return JSONResponse(
            {"error": "Internal server error during payment processing"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


@router.get("")
def payment_info() -> Dict[str, Any]:
    return {"message": "Payment API endpoint. Use POST to process payments."}


@router.get("/history")
def get_payment_history(session: AuthSession = Depends(require_session)) -> List[Dict[str, Any]]:
    return [entry.to_wire() for entry in payment_history()]


@router.get("/prefill")
def get_payment_prefill(
    policy: str = Query(..., description="Policy id to pay the premium for"),
    session: AuthSession = Depends(require_session),
):
    """
    Suggested form values for paying a given policy's premium.
    """
    try:
        return payment_prefill(policy)
    except NotFoundError as exc:
        return error_response(exc)
    except ValueError as exc:
        return error_response(PortalValidationError(str(exc)))
