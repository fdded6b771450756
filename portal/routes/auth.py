"""
API routes for the mock sign-in flow.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from portal.core.errors import AuthenticationError
from portal.routes.dependencies import error_response, get_auth_context, require_session
from portal.schemas.portal_schema import LoginRequest, SignupRequest
from portal.services.auth_service import AuthContext, AuthSession


router = APIRouter(prefix="/api/auth", tags=["auth"])


def _session_payload(session: AuthSession) -> Dict[str, Any]:
    return {"token": session.token, "user": session.user.to_wire()}


@router.post("/login")
async def login(payload: LoginRequest, auth: AuthContext = Depends(get_auth_context)):
    """
    Sign in. Any email works with the demo password.
    """
    session = await auth.login(payload.email, payload.password)
    if session is None:
        return error_response(AuthenticationError("Invalid credentials"))
    return _session_payload(session)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, auth: AuthContext = Depends(get_auth_context)):
    session = await auth.signup(payload)
    return JSONResponse(_session_payload(session), status_code=status.HTTP_201_CREATED)


@router.post("/logout")
def logout(auth: AuthContext = Depends(get_auth_context)) -> Dict[str, Any]:
    auth.logout()
    return {"success": True, "message": "Logged out"}


@router.get("/me")
def current_user(session: AuthSession = Depends(require_session)) -> Dict[str, Any]:
    return {"user": session.user.to_wire()}
