"""
FastAPI application factory and entry point.

This module creates and configures the FastAPI application:
  1. Lifespan manager — logging setup, DB table creation, engine disposal
  2. CORS middleware — allows frontend origins (with cookies) to call the API
  3. Exception handlers — maps domain and framework errors to HTTP responses
  4. Router registration — mounts the transactions routes

Running locally:
    uvicorn ledger_api.main:app --reload
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger_api import models  # noqa: F401  (registers tables on Base.metadata)
from ledger_api.config import settings
from ledger_api.database import engine, Base
from ledger_api.exceptions import register_exception_handlers
from ledger_api.logging import setup_logging
from ledger_api.routers import transactions

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
      Configures structlog, then creates the transactions table if it
      doesn't exist. There is no migration tooling; create_all is the schema.

    Shutdown:
      Disposes of the database engine, closing all connections cleanly.
    """
    # --- Startup ---
    setup_logging(log_level=settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("app_starting", version=settings.APP_VERSION)
    yield
    # --- Shutdown ---
    logger.info("app_stopping")
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Session-scoped ledger of credits and debits",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(
    transactions.router,
    prefix=settings.TRANSACTIONS_PREFIX,
    tags=["Transactions"],
)


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe for deployment tooling."""
    return {"status": "ok", "version": settings.APP_VERSION}
