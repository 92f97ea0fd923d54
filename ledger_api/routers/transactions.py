"""
Transactions router — record and query a session's credits and debits.

Mounted at settings.TRANSACTIONS_PREFIX (default /transactions):
  GET  /transactions           — List the session's transactions   [session required]
  GET  /transactions/summary   — Sum of the session's amounts      [session required]
  GET  /transactions/{id}      — One transaction, or null          [session required]
  POST /transactions           — Record a transaction; creates a session cookie if absent

Every route passes through log_request first (router-level dependency).
The collection routes answer both /transactions and /transactions/.
/summary is declared before /{id} so the literal path wins.
"""

import uuid

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.database import get_db
from ledger_api.dependencies import log_request, require_session
from ledger_api.schemas.transaction import (
    Summary,
    SummaryResponse,
    TransactionCreateRequest,
    TransactionDetailResponse,
    TransactionListResponse,
)
from ledger_api.services import transaction_service
from ledger_api.session import apply_cookie_instruction, resolve_or_create_session

router = APIRouter(dependencies=[Depends(log_request)])


@router.get(
    "",
    response_model=TransactionListResponse,
    summary="List the session's transactions",
)
@router.get("/", response_model=TransactionListResponse, include_in_schema=False)
async def list_transactions(
    session_id: str = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    """Every transaction recorded under the caller's session."""
    transactions = await transaction_service.list_transactions(db=db, session_id=session_id)
    return {"transactions": transactions}


@router.get(
    "/summary",
    response_model=SummaryResponse,
    summary="Sum the session's transaction amounts",
)
async def get_summary(
    session_id: str = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    """
    Net total of the session: credits minus debits.

    A session with no transactions has a total of 0.
    """
    amount = await transaction_service.get_summary(db=db, session_id=session_id)
    return {"summary": Summary(amount=amount)}


@router.get(
    "/{transaction_id}",
    response_model=TransactionDetailResponse,
    summary="Get a single transaction",
)
async def get_transaction(
    transaction_id: uuid.UUID,
    session_id: str = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    """
    Fetch a transaction by id. Returns `{"transaction": null}` when no row
    matches both the id and the caller's session.
    """
    transaction = await transaction_service.get_transaction(
        db=db,
        session_id=session_id,
        transaction_id=transaction_id,
    )
    return {"transaction": transaction}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Record a credit or debit",
)
@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    include_in_schema=False,
)
async def create_transaction(
    body: TransactionCreateRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """
    Record a transaction for the caller's session.

    - **credit**: amount stored as submitted
    - **debit**: amount stored negated

    Requests without a session cookie get a new session; the response then
    sets the `sessionId` cookie for 7 days. An existing cookie is reused and
    never re-set. The response body is empty.
    """
    session_id, instruction = resolve_or_create_session(request.cookies)

    await transaction_service.create_transaction(
        db=db,
        session_id=session_id,
        title=body.title,
        amount=body.amount,
        txn_type=body.type,
    )

    response = Response(status_code=status.HTTP_201_CREATED)
    apply_cookie_instruction(response, instruction)
    return response
