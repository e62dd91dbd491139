"""Unified error codes and custom exceptions.

Error code ranges:
  2xxx: Account
  3xxx: Ledger entry / dispute flow
  4xxx: Input (amounts, transaction kinds)
  9xxx: System

Callers match on the exception class or `code`; `message` is presentation only.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 2xxx: Account ---

class InsufficientFundsError(AppError):
    def __init__(self) -> None:
        super().__init__(2001, "Insufficient funds", 422)


class AccountLockedError(AppError):
    def __init__(self) -> None:
        super().__init__(2002, "Account is locked", 423)


class AccountNotFoundError(AppError):
    def __init__(self, client_id: int) -> None:
        self.client_id = client_id
        super().__init__(2003, f"Account not found for client {client_id}", 404)


# --- 3xxx: Ledger entry / dispute flow ---

class TransactionNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(3001, "Transaction not found", 404)


class TransactionAlreadyDisputedError(AppError):
    def __init__(self) -> None:
        super().__init__(3002, "Transaction already disputed", 409)


class TransactionAlreadyChargedBackError(AppError):
    def __init__(self) -> None:
        super().__init__(3003, "Transaction already charged back", 409)


class TransactionIsWithdrawalError(AppError):
    def __init__(self) -> None:
        super().__init__(3004, "Withdrawal transaction cannot be disputed", 422)


class TransactionNotDisputedError(AppError):
    def __init__(self) -> None:
        super().__init__(3005, "Transaction is not disputed", 409)


# --- 4xxx: Input ---

class InvalidAmountFormatError(AppError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(4001, f"Invalid amount format: {detail}", 422)


class AmountMustBePositiveError(AppError):
    def __init__(self) -> None:
        super().__init__(4002, "Amount must be positive", 422)


class UnknownTransactionTypeError(AppError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(4003, f"Unknown transaction type: {name}", 422)


class MissingAmountError(AppError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(4004, f"{kind.capitalize()} requires an amount", 422)


class AmountOverflowError(AppError):
    def __init__(self, scaled: int) -> None:
        self.scaled = scaled
        super().__init__(4005, f"Amount out of representable range: {scaled} (scaled)", 422)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
