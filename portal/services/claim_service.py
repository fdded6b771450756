"""
Claim submission service.

Validates a submitted claim form, waits out a simulated processing delay and
returns a fabricated confirmation. Attachments are reduced to their file
names; nothing is stored.
"""
from __future__ import annotations

import asyncio
import logging
import math
import random
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Union

from portal.core.errors import PortalValidationError
from portal.core.identifiers import epoch_millis, random_suffix, utc_now_iso
from portal.schemas.portal_schema import ClaimSubmission, ContactInfo


logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 10
DOCUMENT_FIELD_PREFIX = "document_"

NEXT_STEPS: List[str] = [
    "Your claim has been received and assigned a claim number",
    "Our claims adjuster will review your submission within 2-3 business days",
    "You will receive an email update when the status changes",
    "Additional documentation may be requested if needed",
]
ESTIMATED_PROCESSING_TIME = "5-10 business days"
CLAIMS_CONTACT = ContactInfo(claims_hotline="1-800-CLAIMS", email="claims@secureinsure.com")


def parse_incident_date(value: str) -> Union[date, datetime]:
    """
    Parse an incident date given as ``YYYY-MM-DD`` or a full ISO datetime.

    Raises:
        PortalValidationError: If the value is not a recognizable date.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        if "T" in text or " " in text:
            return datetime.fromisoformat(text)
        return date.fromisoformat(text)
    except ValueError as exc:
        raise PortalValidationError("Invalid incident date") from exc


def is_in_future(incident: Union[date, datetime], now: Optional[datetime] = None) -> bool:
    """
    Check whether an incident date lies strictly after the current moment.

    Date-only values are compared against today's date; aware datetimes are
    compared against UTC now.
    """
    if isinstance(incident, datetime):
        if incident.tzinfo is not None:
            current = now.astimezone(timezone.utc) if now and now.tzinfo else datetime.now(timezone.utc)
            return incident > current
        current = now.replace(tzinfo=None) if now else datetime.now()
        return incident > current
    today = (now or datetime.now()).date()
    return incident > today


def parse_estimated_amount(value: Optional[str]) -> float:
    """
    Parse the optional estimated amount. Blank means 0.

    Raises:
        PortalValidationError: If the value is not a finite, non-negative number.
    """
    if value is None or not str(value).strip():
        return 0.0
    try:
        amount = float(str(value).strip())
    except ValueError as exc:
        raise PortalValidationError("Invalid estimated amount") from exc
    if not math.isfinite(amount) or amount < 0:
        raise PortalValidationError("Invalid estimated amount")
    return amount


def text_length(text: str) -> int:
    """Length in UTF-16 code units, the way browsers count form input."""
    return len(text.encode("utf-16-le")) // 2


def _field(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def extract_document_names(entries: Iterable[tuple]) -> List[str]:
    """
    Collect file names from ``document_<n>`` entries of a multipart form.

    Entries whose value has no ``filename`` (plain text fields) are skipped.
    """
    names: List[str] = []
    for key, value in entries:
        if not str(key).startswith(DOCUMENT_FIELD_PREFIX):
            continue
        filename = getattr(value, "filename", None)
        if filename:
            names.append(filename)
    return names


class ClaimService:
    """
    Validates and acknowledges claim submissions.

    Every call is independent; nothing is persisted between submissions.
    """

    def __init__(self, processing_delay: float = 1.5, rng: Optional[random.Random] = None):
        if processing_delay < 0:
            raise ValueError("processing_delay cannot be negative")
        self.processing_delay = processing_delay
        self._rng = rng or random.Random()

    def validate(self, form: Mapping[str, Any], now: Optional[datetime] = None) -> float:
        """
        Run the claim validation rules in order.

        Returns:
            The parsed estimated amount (0 when absent).

        Raises:
            PortalValidationError: On the first rule that fails.
        """
        policy_id = _field(form, "policyId")
        description = _field(form, "description")
        incident_date = _field(form, "incidentDate")

        if not policy_id or not description or not incident_date:
            raise PortalValidationError(
                "Missing required fields: policyId, description, and incidentDate are required"
            )

        if text_length(description) < MIN_DESCRIPTION_LENGTH:
            raise PortalValidationError(
                f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters long"
            )

        if is_in_future(parse_incident_date(incident_date), now=now):
            raise PortalValidationError("Incident date cannot be in the future")

        return parse_estimated_amount(form.get("estimatedAmount"))

    async def submit(
        self,
        form: Mapping[str, Any],
        documents: Optional[List[str]] = None,
    ) -> ClaimSubmission:
        """
        Validate a claim form and fabricate its confirmation.

        Args:
            form: Submitted text fields (policyId, description, incidentDate,
                estimatedAmount).
            documents: Names of attached files.

        Raises:
            PortalValidationError: If any field fails validation.
        """
        estimated_amount = self.validate(form)

        if self.processing_delay:
            await asyncio.sleep(self.processing_delay)

        millis = epoch_millis()
        submission = ClaimSubmission(
            claim_id=f"CLM_{millis}_{random_suffix(rng=self._rng)}",
            claim_number=f"CLM-{datetime.now().year}-{str(millis)[-6:]}",
            policy_id=_field(form, "policyId"),
            description=_field(form, "description"),
            incident_date=_field(form, "incidentDate"),
            estimated_amount=estimated_amount,
            submission_date=utc_now_iso(),
            documents=list(documents or []),
            next_steps=list(NEXT_STEPS),
            estimated_processing_time=ESTIMATED_PROCESSING_TIME,
            contact_info=CLAIMS_CONTACT,
        )
        logger.info(
            "Claim %s submitted for policy %s with %d document(s)",
            submission.claim_number,
            submission.policy_id,
            len(submission.documents),
        )
        return submission


__all__ = [
    "ClaimService",
    "parse_incident_date",
    "parse_estimated_amount",
    "is_in_future",
    "extract_document_names",
    "text_length",
    "NEXT_STEPS",
]
