"""Structured logging with structlog.

JSON lines in production, a colorized console in development. Request-scoped
fields (method, path, whether the caller holds a session) are bound into
contextvars by the request logging stage, so every later event of the same
request (transaction_created, storage_error) carries them.

Usage:
    import structlog
    logger = structlog.get_logger(__name__)
    logger.info("event_name", key="value")
"""

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure structlog and route stdlib logging to stdout.

    Args:
        log_level: Python log level string (DEBUG, INFO, WARNING, ERROR).
        json_output: JSON renderer when True, console renderer otherwise.
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        # ConsoleRenderer formats exceptions itself
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # aiosqlite logs every cursor operation at DEBUG
    logging.getLogger("aiosqlite").setLevel(max(level, logging.INFO))


def bind_request_context(method: str, path: str, has_session: bool) -> None:
    """Replace the request-scoped logging context with this request's fields."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        method=method,
        path=path,
        has_session=has_session,
    )
