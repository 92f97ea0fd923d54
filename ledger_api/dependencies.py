"""
FastAPI dependencies shared by the ledger routes.

  log_request      — router-level stage: logs every request reaching the
                     transactions router, including ones later rejected.
  require_session  — read-path precondition gate: resolves the session id
                     from the cookie or rejects the request with 401 before
                     the route handler (and the database) is reached.

The write path does not use require_session; it resolves or mints a session
itself via ledger_api.session.resolve_or_create_session.
"""

import structlog
from fastapi import Request

from ledger_api.config import settings
from ledger_api.exceptions import MissingSessionError
from ledger_api.logging import bind_request_context
from ledger_api.session import read_session_id

logger = structlog.get_logger(__name__)


async def log_request(request: Request) -> None:
    """Bind the request's logging context, then log its method and path."""
    bind_request_context(
        method=request.method,
        path=request.url.path,
        has_session=read_session_id(request.cookies) is not None,
    )
    logger.info(
        "request_received",
        method=request.method,
        path=request.url.path,
    )


async def require_session(request: Request) -> str:
    """
    Return the session id carried by the request's cookie.

    Raises:
        MissingSessionError: If the cookie is absent or empty (mapped to 401).
    """
    session_id = read_session_id(request.cookies)
    if session_id is None:
        raise MissingSessionError(settings.SESSION_COOKIE_NAME)
    return session_id
