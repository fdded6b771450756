"""
Premium payment service.

Validates card details, simulates gateway latency and fabricates a payment
confirmation. No card is ever charged. A configurable share of otherwise
valid payments is declined to mimic an unreliable gateway.
"""
from __future__ import annotations

import asyncio
import logging
import math
import random
import re
from typing import Any, Dict, Optional

from portal.core.errors import PaymentDeclinedError, PortalValidationError
from portal.core.identifiers import epoch_millis, random_suffix, utc_now_iso
from portal.schemas.portal_schema import PaymentConfirmation


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "policyId",
    "amount",
    "cardNumber",
    "expiryDate",
    "cvv",
    "cardholderName",
    "paymentMethod",
)
MIN_CARD_NUMBER_LENGTH = 13
CVV_LENGTH_RANGE = (3, 4)
DECLINE_MESSAGE = "Payment processing failed. Please try again."

_WHITESPACE = re.compile(r"\s")


def _is_missing(value: Any) -> bool:
    # Empty strings, None, zero and False all count as absent
    return not value


def normalize_card_number(card_number: Any) -> str:
    """Strip every whitespace character from a card number."""
    return _WHITESPACE.sub("", str(card_number))


def parse_payment_amount(value: Any) -> float:
    """
    Parse a payment amount given as a number or numeric string.

    Raises:
        PortalValidationError: If the value is not a finite number > 0.
    """
    if isinstance(value, bool):
        raise PortalValidationError("Invalid payment amount")
    try:
        amount = float(str(value).strip())
    except ValueError as exc:
        raise PortalValidationError("Invalid payment amount") from exc
    if not math.isfinite(amount) or amount <= 0:
        raise PortalValidationError("Invalid payment amount")
    return amount


class PaymentService:
    """
    Simulated payment processor.

    Args:
        failure_rate: Probability (0-1) that a valid payment is declined.
        processing_delay: Seconds to wait before answering.
        rng: Random source used for the decline draw and id suffixes.
    """

    def __init__(
        self,
        failure_rate: float = 0.1,
        processing_delay: float = 2.0,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")
        if processing_delay < 0:
            raise ValueError("processing_delay cannot be negative")
        self.failure_rate = failure_rate
        self.processing_delay = processing_delay
        self._rng = rng or random.Random()

        logger.info("Payment processor initialised (failure_rate=%.0f%%)", failure_rate * 100)

    def validate(self, body: Any) -> float:
        """
        Run the payment validation rules in order.

        Returns:
            The parsed payment amount.

        Raises:
            PortalValidationError: On the first rule that fails.
        """
        if not isinstance(body, dict):
            raise PortalValidationError("Missing required fields")

        if any(_is_missing(body.get(name)) for name in REQUIRED_FIELDS):
            raise PortalValidationError("Missing required fields")

        if len(normalize_card_number(body["cardNumber"])) < MIN_CARD_NUMBER_LENGTH:
            raise PortalValidationError("Invalid card number")

        low, high = CVV_LENGTH_RANGE
        if not low <= len(str(body["cvv"])) <= high:
            raise PortalValidationError("Invalid CVV")

        return parse_payment_amount(body["amount"])

    def _should_decline(self) -> bool:
        return self._rng.random() < self.failure_rate

    async def process(self, body: Dict[str, Any]) -> PaymentConfirmation:
        """
        Validate and "charge" a premium payment.

        Raises:
            PortalValidationError: If the request fails validation.
            PaymentDeclinedError: If the simulated gateway declines it.
        """
        amount = self.validate(body)

        if self.processing_delay:
            await asyncio.sleep(self.processing_delay)

        if self._should_decline():
            logger.info("Simulated decline for policy %s amount %.2f", body["policyId"], amount)
            raise PaymentDeclinedError(DECLINE_MESSAGE)

        millis = epoch_millis()
        confirmation = PaymentConfirmation(
            payment_id=f"PAY_{millis}_{random_suffix(rng=self._rng)}",
            transaction_id=f"TXN_{millis}",
            amount=amount,
            policy_id=str(body["policyId"]),
            payment_method=str(body["paymentMethod"]),
            processed_at=utc_now_iso(),
            receipt_url=f"/receipts/receipt-{millis}.pdf",
        )
        logger.info(
            "Payment %s completed for policy %s amount %.2f",
            confirmation.transaction_id,
            confirmation.policy_id,
            amount,
        )
        return confirmation


__all__ = [
    "PaymentService",
    "normalize_card_number",
    "parse_payment_amount",
    "REQUIRED_FIELDS",
    "DECLINE_MESSAGE",
]
