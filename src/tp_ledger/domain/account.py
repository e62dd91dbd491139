"""Account — one client's balances plus the ledger used to validate disputes.

Deposit entry lifecycle:
    NORMAL --dispute--> DISPUTED --resolve--> NORMAL
                        DISPUTED --chargeback--> CHARGED_BACK (terminal, locks account)

Withdrawal entries never enter this lifecycle.

Every operation validates all preconditions and computes the new balances
before assigning anything, so a raised AppError leaves the account unchanged.
The lock check for deposits and withdrawals belongs to Database.
"""

import logging

from src.tp_common.amount import Amount
from src.tp_common.enums import DepositState, TransactionType
from src.tp_common.errors import (
    InsufficientFundsError,
    TransactionAlreadyChargedBackError,
    TransactionAlreadyDisputedError,
    TransactionIsWithdrawalError,
    TransactionNotDisputedError,
    TransactionNotFoundError,
)
from src.tp_ledger.domain.models import DepositEntry, LedgerEntry, WithdrawalEntry
from src.tp_ledger.domain.transaction import Transaction

logger = logging.getLogger(__name__)


class Account:
    def __init__(self) -> None:
        self._ledger: dict[int, LedgerEntry] = {}
        self._available: Amount = Amount.zero()
        self._held: Amount = Amount.zero()
        self._locked: bool = False

    def __repr__(self) -> str:
        return (
            f"Account(available={self._available}, held={self._held}, "
            f"locked={self._locked}, entries={len(self._ledger)})"
        )

    @property
    def available(self) -> Amount:
        return self._available

    @property
    def held(self) -> Amount:
        return self._held

    @property
    def total(self) -> Amount:
        return self._available + self._held

    @property
    def locked(self) -> bool:
        return self._locked

    def transaction_count(self) -> int:
        return len(self._ledger)

    def has_transaction(self, txn_id: int) -> bool:
        return txn_id in self._ledger

    def get_entry(self, txn_id: int) -> LedgerEntry | None:
        return self._ledger.get(txn_id)

    # ------------------------------------------------------------------
    # Mutations (called by Database only)
    # ------------------------------------------------------------------

    def apply(self, txn_id: int, txn: Transaction) -> None:
        if txn.type == TransactionType.DEPOSIT:
            self._deposit(txn_id, txn.amount)  # type: ignore[arg-type]
        elif txn.type == TransactionType.WITHDRAWAL:
            self._withdraw(txn_id, txn.amount)  # type: ignore[arg-type]
        elif txn.type == TransactionType.DISPUTE:
            self._dispute(txn_id)
        elif txn.type == TransactionType.RESOLVE:
            self._resolve(txn_id)
        else:
            self._chargeback(txn_id)

    def _record(self, txn_id: int, entry: LedgerEntry) -> None:
        if txn_id in self._ledger:
            logger.warning("Duplicate tx id %d overwrites earlier ledger entry", txn_id)
        self._ledger[txn_id] = entry

    def _deposit(self, txn_id: int, amount: Amount) -> None:
        self._available = self._available + amount
        self._record(txn_id, DepositEntry(amount=amount))

    def _withdraw(self, txn_id: int, amount: Amount) -> None:
        if self._available < amount:
            raise InsufficientFundsError()
        self._available = self._available - amount
        self._record(txn_id, WithdrawalEntry(amount=amount))

    def _disputable_entry(self, txn_id: int) -> DepositEntry:
        entry = self._ledger.get(txn_id)
        if entry is None:
            raise TransactionNotFoundError()
        if isinstance(entry, WithdrawalEntry):
            raise TransactionIsWithdrawalError()
        return entry

    def _dispute(self, txn_id: int) -> None:
        entry = self._disputable_entry(txn_id)
        if entry.state == DepositState.DISPUTED:
            raise TransactionAlreadyDisputedError()
        if entry.state == DepositState.CHARGED_BACK:
            raise TransactionAlreadyChargedBackError()

        available = self._available - entry.amount
        held = self._held + entry.amount
        self._available, self._held = available, held
        entry.state = DepositState.DISPUTED

    def _resolve(self, txn_id: int) -> None:
        entry = self._disputable_entry(txn_id)
        if entry.state == DepositState.NORMAL:
            raise TransactionNotDisputedError()
        if entry.state == DepositState.CHARGED_BACK:
            raise TransactionAlreadyChargedBackError()

        held = self._held - entry.amount
        available = self._available + entry.amount
        self._available, self._held = available, held
        entry.state = DepositState.NORMAL

    def _chargeback(self, txn_id: int) -> None:
        entry = self._disputable_entry(txn_id)
        if entry.state == DepositState.NORMAL:
            raise TransactionNotDisputedError()
        if entry.state == DepositState.CHARGED_BACK:
            raise TransactionAlreadyChargedBackError()

        self._held = self._held - entry.amount
        entry.state = DepositState.CHARGED_BACK
        self._locked = True
