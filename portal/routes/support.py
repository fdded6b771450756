"""
API routes for the support page: FAQ, chatbot and contact form.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from portal.core.config import Settings
from portal.core.errors import PortalValidationError
from portal.routes.dependencies import (
    error_response,
    get_settings,
    optional_session,
    require_session,
)
from portal.schemas.portal_schema import ChatRequest, ChatResponse, ContactRequest
from portal.services.auth_service import AuthSession
from portal.services.support_service import chatbot_reply, search_faq, submit_contact_request


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/support", tags=["support"])


@router.get("/faq")
def get_faq(q: Optional[str] = Query(None, description="Text to filter questions and answers by")) -> List[Dict[str, Any]]:
    return [item.to_wire() for item in search_faq(q)]


@router.post("/chat")
def chat(payload: ChatRequest, session: Optional[AuthSession] = Depends(optional_session)):
    """
    Scripted chatbot. Greets signed-in users by name.
    """
    user_name = session.user.name if session else None
    try:
        reply = chatbot_reply(payload.message, user_name=user_name)
    except PortalValidationError as exc:
        return error_response(exc)
    return ChatResponse(reply=reply).to_wire()


@router.post("/contact")
async def contact(
    payload: ContactRequest,
    session: AuthSession = Depends(require_session),
    settings: Settings = Depends(get_settings),
):
    try:
        return await submit_contact_request(payload, delay=settings.contact_delay)
    except PortalValidationError as exc:
        logger.warning("Validation error on contact form from %s: %s", session.user.email, exc)
        return error_response(exc)
