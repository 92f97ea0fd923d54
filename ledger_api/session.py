"""
Anonymous session resolution.

A session is nothing more than a random identifier held in the client's
cookie jar; the server keeps no session table. The identifier's only other
home is the session_id column of the transactions it created.

Two concerns are kept apart here:

1. DECIDING (pure)
   resolve_or_create_session() looks at the request cookies and returns the
   session id to use, plus a CookieInstruction when a new id was minted.
   It never touches the response.

2. APPLYING (side effect)
   apply_cookie_instruction() writes the instruction onto the outgoing
   response. This is the only place a session cookie is ever set.

The read-path gate (reject requests without a cookie) lives in
ledger_api.dependencies.require_session.
"""

import uuid
from collections.abc import Mapping
from dataclasses import dataclass

from starlette.responses import Response

from ledger_api.config import settings


@dataclass(frozen=True)
class CookieInstruction:
    """A cookie the response must set."""
    name: str
    value: str
    path: str
    max_age: int


def read_session_id(cookies: Mapping[str, str]) -> str | None:
    """Return the session id carried by the request, or None if absent or empty."""
    session_id = cookies.get(settings.SESSION_COOKIE_NAME)
    return session_id or None


def resolve_or_create_session(
    cookies: Mapping[str, str],
) -> tuple[str, CookieInstruction | None]:
    """
    Reuse the request's session id or mint a new one.

    Args:
        cookies: The inbound request cookies.

    Returns:
        (session_id, instruction). The instruction is None when the request
        already carried a session id, which is then returned unchanged.
        Otherwise a fresh UUID4 string is minted and the instruction asks the
        response to persist it for SESSION_COOKIE_MAX_AGE seconds.
    """
    session_id = read_session_id(cookies)
    if session_id is not None:
        return session_id, None

    session_id = str(uuid.uuid4())
    instruction = CookieInstruction(
        name=settings.SESSION_COOKIE_NAME,
        value=session_id,
        path=settings.SESSION_COOKIE_PATH,
        max_age=settings.SESSION_COOKIE_MAX_AGE,
    )
    return session_id, instruction


def apply_cookie_instruction(
    response: Response, instruction: CookieInstruction | None
) -> None:
    """Set the instructed cookie on the response. No-op when there is none."""
    if instruction is None:
        return
    response.set_cookie(
        key=instruction.name,
        value=instruction.value,
        max_age=instruction.max_age,
        path=instruction.path,
    )
