from __future__ import annotations

from typing import Optional

from ..models.schemas import ErrorKind


class LedgerError(Exception):
    """Base class for failures raised by the account ledger."""


class InvalidAmountError(LedgerError, ValueError):
    """Raised when a deposit or withdrawal amount is below one."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal would drop the balance below zero.

    The ledger raises it with the requested amount and the balance at the
    time of the request. The account client raises it with only the detail
    text it read from the service response. Either way the error is a
    business-rule rejection and retrying will not help.
    """

    retryable = False

    def __init__(
        self,
        message: str,
        amount: Optional[int] = None,
        balance: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.amount = amount
        self.balance = balance


class PersistenceError(LedgerError):
    """Raised when the balance record cannot be read or written."""


class ServiceError(Exception):
    """Rejection rendered by the HTTP layer as a 400 plain text response."""

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.body)

    @property
    def body(self) -> str:
        if self.detail is None:
            return f"ERROR: {self.kind.value}"
        return f"ERROR: {self.kind.value}: {self.detail}"


class AccountServiceError(Exception):
    """Generic failure talking to an account service.

    Covers transport errors (``status_code`` is ``None``) and error
    responses other than insufficient funds.
    """

    retryable = True

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
