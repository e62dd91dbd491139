"""Transaction values handed to the registry.

Deposit and withdrawal carry a validated positive Amount. Dispute, resolve
and chargeback carry nothing: they act on a transaction id supplied when
the transaction is applied, and are validated against ledger state then.
"""

from dataclasses import dataclass

from src.tp_common.amount import Amount
from src.tp_common.enums import TransactionType
from src.tp_common.errors import (
    AmountMustBePositiveError,
    MissingAmountError,
    UnknownTransactionTypeError,
)


def _positive_amount(text: str) -> Amount:
    amount = Amount.parse(text)
    if amount <= Amount.zero():
        raise AmountMustBePositiveError()
    return amount


@dataclass(frozen=True)
class Transaction:
    type: TransactionType
    amount: Amount | None = None

    @classmethod
    def deposit(cls, amount_text: str) -> "Transaction":
        return cls(TransactionType.DEPOSIT, _positive_amount(amount_text))

    @classmethod
    def withdrawal(cls, amount_text: str) -> "Transaction":
        return cls(TransactionType.WITHDRAWAL, _positive_amount(amount_text))

    @classmethod
    def dispute(cls) -> "Transaction":
        return cls(TransactionType.DISPUTE)

    @classmethod
    def resolve(cls) -> "Transaction":
        return cls(TransactionType.RESOLVE)

    @classmethod
    def chargeback(cls) -> "Transaction":
        return cls(TransactionType.CHARGEBACK)

    @property
    def is_funds_movement(self) -> bool:
        """Deposits and withdrawals; the only kinds blocked on a locked account."""
        return self.type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)


def parse_transaction(kind: str, amount_text: str | None = None) -> Transaction:
    """Build a Transaction from an already-tokenized record.

    `kind` is trimmed and matched case-insensitively. `amount_text` is
    required for deposit/withdrawal and ignored for the dispute family.
    """
    try:
        txn_type = TransactionType(kind.strip().lower())
    except ValueError:
        raise UnknownTransactionTypeError(kind.strip()) from None

    if txn_type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL):
        if amount_text is None or not amount_text.strip():
            raise MissingAmountError(txn_type.value)
        if txn_type == TransactionType.DEPOSIT:
            return Transaction.deposit(amount_text)
        return Transaction.withdrawal(amount_text)

    if txn_type == TransactionType.DISPUTE:
        return Transaction.dispute()
    if txn_type == TransactionType.RESOLVE:
        return Transaction.resolve()
    return Transaction.chargeback()
