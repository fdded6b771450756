"""
API routes for the policy dashboard.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from portal.core.errors import NotFoundError
from portal.routes.dependencies import error_response, require_session
from portal.services.auth_service import AuthSession
from portal.services.dashboard_service import build_summary, get_policy_detail, list_policies


router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
def dashboard(session: AuthSession = Depends(require_session)) -> Dict[str, Any]:
    """
    Everything the dashboard page shows: the user, their policies and totals.
    """
    policies = list_policies()
    return {
        "user": session.user.to_wire(),
        "policies": [p.to_wire() for p in policies],
        "summary": build_summary(policies).to_wire(),
    }


@router.get("/policies")
def get_policies(session: AuthSession = Depends(require_session)) -> List[Dict[str, Any]]:
    return [p.to_wire() for p in list_policies()]


@router.get("/policies/{policy_id}")
def get_policy(policy_id: str, session: AuthSession = Depends(require_session)):
    try:
        detail = get_policy_detail(policy_id)
    except NotFoundError as exc:
        return error_response(exc)
    return {
        "policy": detail["policy"].to_wire(),
        "claims": [c.to_wire() for c in detail["claims"]],
    }
