"""
Transaction model — one row per credit or debit recorded by a session.

Every row belongs to exactly one anonymous session through `session_id`;
all reads filter on it, so a session never sees another session's rows.

Key fields:
  - amount: Signed. Credits are stored as submitted, debits negated, so
    SUM(amount) over a session is its running total.
  - type: The declared direction, "credit" or "debit". The sign alone can't
    tell a zero debit from a zero credit, and a credit submitted with a
    negative magnitude is stored as-is.

Rows are written once and never updated or deleted.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ledger_api.database import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True,
        default=uuid.uuid4,
    )

    # Opaque session identifier taken from the sessionId cookie
    session_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Signed amount: positive for credit, negative for debit
    amount: Mapped[float] = mapped_column(
        Float,
        nullable=False,
    )

    # "credit" or "debit"
    type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
