"""Global enums shared by the ledger, ingest and API layers."""

from enum import Enum


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


class DepositState(str, Enum):
    """Dispute lifecycle of a deposit: NORMAL <-> DISPUTED -> CHARGED_BACK (terminal)."""
    NORMAL = "NORMAL"
    DISPUTED = "DISPUTED"
    CHARGED_BACK = "CHARGED_BACK"
