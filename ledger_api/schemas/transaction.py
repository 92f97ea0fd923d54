"""
Pydantic schemas for the transaction endpoints.

Response envelopes wrap their payload in a named key ({"transactions": ...},
{"transaction": ...}, {"summary": ...}) so clients can tell an absent
transaction (null) from an error body.
"""

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class TransactionCreateRequest(BaseModel):
    """Request body for POST /transactions."""
    title: str = Field(min_length=1)
    # strict: JSON numbers only, "5000" or true are rejected; 1e400, NaN and
    # Infinity parse to non-finite floats and are rejected too
    amount: float = Field(
        strict=True,
        allow_inf_nan=False,
        description="Magnitude; sign is set from type",
    )
    type: Literal["credit", "debit"]


class TransactionResponse(BaseModel):
    """Public representation of a transaction."""
    id: uuid.UUID
    session_id: str
    title: str
    amount: float
    type: str
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """SQLite drops the offset on read; stored timestamps are always UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class TransactionListResponse(BaseModel):
    """Response body for GET /transactions."""
    transactions: list[TransactionResponse]


class TransactionDetailResponse(BaseModel):
    """Response body for GET /transactions/{id}. `transaction` is null when not found."""
    transaction: TransactionResponse | None


class Summary(BaseModel):
    amount: float


class SummaryResponse(BaseModel):
    """Response body for GET /transactions/summary."""
    summary: Summary
