"""
Custom exception classes and FastAPI exception handlers.

The session gate and the ledger service raise domain errors without
importing HTTP concepts; the handlers registered here translate them into
responses with a consistent body: {"detail": ..., "error_type": ...}.

Exception hierarchy:
    LedgerAPIError (base)
    └── MissingSessionError   — read operation without a session cookie

Framework errors handled here as well:
    RequestValidationError    — 400, bad path parameter or request body
    SQLAlchemyError           — 500, backing-store failure (logged, not retried)
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class LedgerAPIError(Exception):
    """Base exception for all Session Ledger API domain errors."""

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class MissingSessionError(LedgerAPIError):
    """Raised when a read operation arrives without a session cookie."""

    def __init__(self, cookie_name: str = "sessionId"):
        self.cookie_name = cookie_name
        super().__init__(f"Missing session: the {cookie_name} cookie is required")


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    Called once during app startup in main.py.
    """

    @app.exception_handler(MissingSessionError)
    async def missing_session_handler(
        request: Request, exc: MissingSessionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"detail": exc.detail, "error_type": "missing_session"},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # 400, not FastAPI's default 422. The offending input is left out:
        # it may be a non-finite float, which JSON cannot carry.
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Request validation failed",
                "error_type": "validation_error",
                "errors": jsonable_encoder(errors),
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.exception(
            "storage_error",
            method=request.method,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Storage failure", "error_type": "storage_error"},
        )
