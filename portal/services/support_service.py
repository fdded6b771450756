"""
Support desk: FAQ search, the scripted chatbot and the contact form.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from portal.core.errors import PortalValidationError
from portal.core.identifiers import epoch_millis
from portal.core.mock_data import FAQ_DATA
from portal.schemas.portal_schema import ContactRequest, FAQItem


logger = logging.getLogger(__name__)

DEFAULT_REPLY = (
    "Thank you for your message. Our customer service team will get back to you shortly."
)
CLAIM_REPLY = (
    "For claim-related inquiries, you can check your claim status in the Claims section "
    "of your dashboard or call our claims hotline at 1-800-CLAIMS."
)
BILLING_REPLY = (
    "For payment assistance, visit the Payment section in your dashboard or contact our "
    "billing department at 1-800-BILLING."
)
POLICY_REPLY = (
    "Policy information can be found in your Dashboard. For policy changes, please contact "
    "your agent or call 1-800-POLICY."
)
GREETING_TEMPLATE = (
    "Hello {name}! How can I help you today? You can ask about claims, payments, "
    "policies, or general questions."
)


def search_faq(query: Optional[str] = None) -> List[FAQItem]:
    """Return FAQ entries whose question or answer contains ``query`` (case-insensitive)."""
    if not query or not query.strip():
        return list(FAQ_DATA)
    needle = query.strip().lower()
    return [
        item for item in FAQ_DATA
        if needle in item.question.lower() or needle in item.answer.lower()
    ]


def chatbot_reply(message: str, user_name: Optional[str] = None) -> str:
    """
    Pick a canned reply by keyword. First matching rule wins.

    Matching is plain substring search, so "this" counts as a greeting.

    Raises:
        PortalValidationError: If the message is blank.
    """
    if not message or not message.strip():
        raise PortalValidationError("Message cannot be empty")

    lowered = message.lower()
    if "claim" in lowered:
        return CLAIM_REPLY
    if "payment" in lowered or "premium" in lowered:
        return BILLING_REPLY
    if "policy" in lowered:
        return POLICY_REPLY
    if "hello" in lowered or "hi" in lowered:
        return GREETING_TEMPLATE.format(name=user_name or "there")
    return DEFAULT_REPLY


async def submit_contact_request(request: ContactRequest, delay: float = 1.0) -> dict:
    """
    Accept a contact form and issue a ticket id. Nothing is sent anywhere.

    Raises:
        PortalValidationError: If subject or message is blank.
    """
    if not request.subject.strip() or not request.message.strip():
        raise PortalValidationError("Subject and message are required")

    if delay:
        await asyncio.sleep(delay)

    ticket_id = f"TKT_{epoch_millis()}"
    logger.info("Support ticket %s opened with %s priority", ticket_id, request.priority.value)
    return {
        "success": True,
        "ticketId": ticket_id,
        "priority": request.priority.value,
        "message": "Your message has been sent. Our support team will respond within 24 hours.",
    }


__all__ = [
    "search_faq",
    "chatbot_reply",
    "submit_contact_request",
    "DEFAULT_REPLY",
]
