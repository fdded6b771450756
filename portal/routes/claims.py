"""
API routes for claim submission and claim history.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from portal.core.errors import PortalValidationError
from portal.routes.dependencies import error_response, get_claim_service, require_session
from portal.services.auth_service import AuthSession
from portal.services.claim_service import ClaimService, extract_document_names
from portal.services.dashboard_service import claim_history


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/claims", tags=["claims"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_claim(
    request: Request,
    claim_service: ClaimService = Depends(get_claim_service),
):
    """
    Submit a new claim as a multipart form.

    - Validation errors return HTTP 400
    - Unexpected errors return HTTP 500
    """
    try:
        form = await request.form()
        documents = extract_document_names(form.multi_items())
        fields = {}
        for key, value in form.multi_items():
            if not key.startswith("document_"):
                fields.setdefault(key, value)
        submission = await claim_service.submit(fields, documents=documents)
        return JSONResponse(submission.to_wire(), status_code=status.HTTP_201_CREATED)
    except PortalValidationError as exc:
        logger.warning("Validation error while submitting claim: %s", exc)
        return error_response(exc)
    except Exception:
        logger.exception("Claims processing error")
        return JSONResponse(
            {"error": "Internal server error during claim submission"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


@router.get("")
def claims_info() -> Dict[str, Any]:
    """
    Describe the claims endpoint.
    """
    return {
        "message": "Claims API endpoint. Use POST to submit new claims.",
        "endpoints": {
            "POST /api/claims": "Submit a new claim",
            "GET /api/claims": "Get claim information (not implemented in demo)",
            "GET /api/claims/history": "List claims on file with their progress",
        },
    }


@router.get("/history")
def get_claim_history(session: AuthSession = Depends(require_session)) -> List[Dict[str, Any]]:
    return [entry.to_wire() for entry in claim_history()]
