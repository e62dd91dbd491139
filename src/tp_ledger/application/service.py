"""LedgerApplicationService — thin composition layer over Database.

Converts request schemas into Transaction values, applies them, and shapes
the resulting account state into response schemas. The Database lives in
memory for the lifetime of the service.
"""

import logging

from src.tp_common.errors import AccountNotFoundError, AppError
from src.tp_ledger.application.schemas import (
    AccountListResponse,
    AccountResponse,
    BatchErrorItem,
    BatchResponse,
    TransactionRequest,
)
from src.tp_ledger.domain.database import Database
from src.tp_ledger.domain.transaction import parse_transaction

logger = logging.getLogger(__name__)


class LedgerApplicationService:
    def __init__(self, database: Database | None = None) -> None:
        self._db: Database = database if database is not None else Database()

    @property
    def database(self) -> Database:
        return self._db

    def _apply(self, body: TransactionRequest) -> None:
        transaction = parse_transaction(body.type, body.amount)
        self._db.process_transaction(body.client, body.tx, transaction)

    def submit(self, body: TransactionRequest) -> AccountResponse:
        self._apply(body)
        return self.get_account(body.client)

    def submit_batch(self, records: list[TransactionRequest]) -> BatchResponse:
        errors: list[BatchErrorItem] = []
        for index, body in enumerate(records):
            try:
                self._apply(body)
            except AppError as exc:
                errors.append(BatchErrorItem(
                    index=index,
                    client=body.client,
                    tx=body.tx,
                    code=exc.code,
                    message=exc.message,
                ))
        if errors:
            logger.info("Batch of %d records: %d rejected", len(records), len(errors))
        return BatchResponse(
            processed=len(records) - len(errors),
            failed=len(errors),
            errors=errors,
        )

    def get_account(self, client_id: int) -> AccountResponse:
        account = self._db.get_account(client_id)
        if account is None:
            raise AccountNotFoundError(client_id)
        return AccountResponse.from_account(client_id, account)

    def list_accounts(self) -> AccountListResponse:
        return AccountListResponse(items=[
            AccountResponse.from_account(client_id, account)
            for client_id, account in self._db.accounts_sorted()
        ])
