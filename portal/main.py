"""
FastAPI application initialization for the SecureInsure customer portal.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portal.core.config import Settings, get_settings
from portal.core.errors import PortalError
from portal.core.local_storage import LocalStorage
from portal.routes.auth import router as auth_router
from portal.routes.claims import router as claims_router
from portal.routes.dashboard import router as dashboard_router
from portal.routes.dependencies import error_response
from portal.routes.payments import router as payments_router
from portal.routes.receipts import router as receipts_router
from portal.routes.support import router as support_router
from portal.services.auth_service import AuthContext
from portal.services.claim_service import ClaimService
from portal.services.payment_service import PaymentService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the portal application.

    Args:
        settings: Configuration to use; defaults to the environment.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="SecureInsure Customer Portal API",
        description="Demo insurance portal: mock sign-in, policies, payments, claims and support",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.auth_context = AuthContext(
        LocalStorage(settings.storage_path),
        password=settings.demo_password,
        delay=settings.auth_delay,
    )
    app.state.claim_service = ClaimService(processing_delay=settings.claim_processing_delay)
    app.state.payment_service = PaymentService(
        failure_rate=settings.payment_failure_rate,
        processing_delay=settings.payment_processing_delay,
    )

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        field_path = ".".join(str(p) for p in errors[0].get("loc", ())[1:]) if errors else ""
        message = f"{field_path}: {detail}" if field_path else detail
        logger.warning("Request validation failed on %s: %s", request.url.path, message)
        return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(claims_router)
    app.include_router(payments_router)
    app.include_router(support_router)
    app.include_router(receipts_router)

    @app.get("/health")
    def health():
        """
        Application health check endpoint.
        """
        return {"status": "healthy", "service": "customer_portal"}

    return app


app = create_app()
