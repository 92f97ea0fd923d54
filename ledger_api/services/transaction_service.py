"""
Transaction service — the session-scoped ledger.

Every function takes the caller's session id and filters on it, so no code
path reads another session's rows. Each operation is one self-contained
statement; there are no multi-step transactions, locks, or retries.

Amount sign normalization:
  The client submits a magnitude plus a direction. Credits are stored
  unchanged and debits negated, so the session total is a plain SUM(amount).
  Magnitudes are not checked for positivity: a credit of -10 is stored as
  -10. The declared direction is kept in the `type` column regardless.
"""

import uuid
from typing import Literal

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.models.transaction import Transaction

logger = structlog.get_logger(__name__)

TransactionType = Literal["credit", "debit"]


def signed_amount(amount: float, txn_type: TransactionType) -> float:
    """Return the amount to store: unchanged for a credit, negated for a debit."""
    if txn_type == "credit":
        return amount
    return amount * -1


async def create_transaction(
    db: AsyncSession,
    session_id: str,
    title: str,
    amount: float,
    txn_type: TransactionType,
) -> Transaction:
    """
    Record a new credit or debit for a session.

    Args:
        db: Database session.
        session_id: The owning session (bound on the row so reads find it).
        title: Free-text label.
        amount: Magnitude as submitted by the client.
        txn_type: "credit" or "debit".

    Returns:
        The created Transaction instance (flushed, id assigned).
    """
    txn = Transaction(
        id=uuid.uuid4(),
        session_id=session_id,
        title=title,
        amount=signed_amount(amount, txn_type),
        type=txn_type,
    )
    db.add(txn)
    await db.flush()

    logger.info(
        "transaction_created",
        transaction_id=str(txn.id),
        type=txn_type,
        amount=txn.amount,
    )
    return txn


async def list_transactions(
    db: AsyncSession,
    session_id: str,
) -> list[Transaction]:
    """List every transaction of a session, oldest first."""
    result = await db.execute(
        select(Transaction)
        .where(Transaction.session_id == session_id)
        .order_by(Transaction.created_at)
    )
    return list(result.scalars().all())


async def get_transaction(
    db: AsyncSession,
    session_id: str,
    transaction_id: uuid.UUID,
) -> Transaction | None:
    """
    Fetch one transaction by id, within a session.

    A row that exists under a different session is reported exactly like a
    missing one: None. Absence is not an error.
    """
    result = await db.execute(
        select(Transaction).where(
            Transaction.session_id == session_id,
            Transaction.id == transaction_id,
        )
    )
    return result.scalar_one_or_none()


async def get_summary(
    db: AsyncSession,
    session_id: str,
) -> float:
    """Return the sum of a session's signed amounts (0 when it has none)."""
    result = await db.execute(
        select(func.coalesce(func.sum(Transaction.amount), 0))
        .where(Transaction.session_id == session_id)
    )
    return result.scalar_one()
