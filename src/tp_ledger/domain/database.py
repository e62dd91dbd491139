"""Database — in-memory registry of client accounts.

Accounts are created on first reference by any transaction, including a
dispute that will then fail its ledger lookup. Accounts are never removed.
"""

import logging
from collections.abc import Iterator

from src.tp_common.errors import AccountLockedError
from src.tp_ledger.domain.account import Account
from src.tp_ledger.domain.transaction import Transaction

logger = logging.getLogger(__name__)


class Database:
    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._accounts

    def _get_or_create_account(self, client_id: int) -> Account:
        if client_id not in self._accounts:
            self._accounts[client_id] = Account()
        return self._accounts[client_id]

    def process_transaction(self, client_id: int, txn_id: int, transaction: Transaction) -> None:
        """Apply one transaction to the client's account.

        Raises AccountLockedError for a deposit/withdrawal on a locked account;
        dispute, resolve and chargeback still reach the ledger once locked.
        Any other AppError comes from Account and leaves it unchanged.
        """
        account = self._get_or_create_account(client_id)

        if transaction.is_funds_movement and account.locked:
            raise AccountLockedError()

        account.apply(txn_id, transaction)
        logger.debug(
            "Applied %s: client=%d tx=%d available=%s held=%s",
            transaction.type.value, client_id, txn_id, account.available, account.held,
        )

    def get_account(self, client_id: int) -> Account | None:
        """None means no transaction ever referenced this client."""
        return self._accounts.get(client_id)

    def get_all_client_ids(self) -> list[int]:
        """Unordered; sort before building a deterministic report."""
        return list(self._accounts.keys())

    def accounts_sorted(self) -> Iterator[tuple[int, Account]]:
        for client_id in sorted(self._accounts):
            yield client_id, self._accounts[client_id]
