"""
FastAPI dependencies shared by the routers.

Services live on ``app.state`` (see ``portal.main.create_app``) so each app
instance, including test apps, carries its own configuration.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request
from fastapi.responses import JSONResponse

from portal.core.config import Settings
from portal.core.errors import AuthenticationError, PortalError
from portal.services.auth_service import AuthContext, AuthSession
from portal.services.claim_service import ClaimService
from portal.services.payment_service import PaymentService


def error_response(exc: PortalError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_context(request: Request) -> AuthContext:
    return request.app.state.auth_context


def get_claim_service(request: Request) -> ClaimService:
    return request.app.state.claim_service


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def optional_session(
    authorization: Optional[str] = Header(None),
    auth: AuthContext = Depends(get_auth_context),
) -> Optional[AuthSession]:
    """The caller's session if a valid bearer token was sent, else None."""
    return auth.resolve(_bearer_token(authorization))


def require_session(
    session: Optional[AuthSession] = Depends(optional_session),
) -> AuthSession:
    """
    Gate an endpoint behind a signed-in user.

    Raises:
        AuthenticationError: If no valid session token was presented.
    """
    if session is None:
        raise AuthenticationError("Not authenticated")
    return session


__all__ = [
    "error_response",
    "get_settings",
    "get_auth_context",
    "get_claim_service",
    "get_payment_service",
    "optional_session",
    "require_session",
]
