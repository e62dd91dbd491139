"""Pydantic schemas for the ledger API.

Amounts travel as 4-decimal strings ("123.4500"), never JSON floats.
"""

from pydantic import BaseModel, Field, field_validator

from src.tp_ledger.domain.account import Account
from src.tp_ledger.domain.models import MAX_CLIENT_ID, MAX_TX_ID

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class TransactionRequest(BaseModel):
    type: str = Field(..., description="deposit | withdrawal | dispute | resolve | chargeback")
    client: int = Field(..., ge=0, le=MAX_CLIENT_ID)
    tx: int = Field(..., ge=0, le=MAX_TX_ID)
    amount: str | None = Field(None, description="Required for deposit and withdrawal")

    @field_validator("type")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("type must not be blank")
        return v


class BatchRequest(BaseModel):
    records: list[TransactionRequest] = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccountResponse(BaseModel):
    client: int
    available: str
    held: str
    total: str
    locked: bool
    transaction_count: int

    @classmethod
    def from_account(cls, client_id: int, account: Account) -> "AccountResponse":
        return cls(
            client=client_id,
            available=str(account.available),
            held=str(account.held),
            total=str(account.total),
            locked=account.locked,
            transaction_count=account.transaction_count(),
        )


class AccountListResponse(BaseModel):
    items: list[AccountResponse]


class BatchErrorItem(BaseModel):
    index: int  # position in BatchRequest.records
    client: int
    tx: int
    code: int
    message: str


class BatchResponse(BaseModel):
    processed: int
    failed: int
    errors: list[BatchErrorItem]
