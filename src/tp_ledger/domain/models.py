"""Ledger entries — pure dataclasses, one per recorded deposit or withdrawal."""

from dataclasses import dataclass

from src.tp_common.amount import Amount
from src.tp_common.enums import DepositState

# Identifier widths accepted from input records
MAX_CLIENT_ID: int = 2**16 - 1
MAX_TX_ID: int = 2**32 - 1


@dataclass
class DepositEntry:
    amount: Amount                            # original deposit, never changes
    state: DepositState = DepositState.NORMAL


@dataclass(frozen=True)
class WithdrawalEntry:
    # Stored for the audit trail; the dispute flow never reads it
    amount: Amount


LedgerEntry = DepositEntry | WithdrawalEntry
