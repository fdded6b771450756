"""
Error taxonomy for the portal API.

Each exception carries the HTTP status it maps to. Routes translate them into
``{"error": message}`` bodies.
"""
from __future__ import annotations


class PortalError(Exception):
    """Base class for expected, user-facing failures."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PortalValidationError(PortalError, ValueError):
    """A required field is missing or malformed."""

    status_code = 400


class AuthenticationError(PortalError):
    """No valid session, or credentials were rejected."""

    status_code = 401


class PaymentDeclinedError(PortalError):
    """The simulated payment gateway declined the charge."""

    status_code = 402


class NotFoundError(PortalError):
    status_code = 404


__all__ = [
    "PortalError",
    "PortalValidationError",
    "AuthenticationError",
    "PaymentDeclinedError",
    "NotFoundError",
]
