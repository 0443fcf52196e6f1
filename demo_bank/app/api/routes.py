from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..core.dependencies import get_amount, get_idempotency_key, get_ledger
from ..core.errors import InsufficientFundsError, LedgerError, ServiceError
from ..models import ErrorKind
from ..services import Ledger


router = APIRouter(tags=["account"], default_response_class=PlainTextResponse)

@router.get("/balance")
def get_balance(ledger: Ledger = Depends(get_ledger)) -> str:
    return f"SUCCESS: balance={ledger.get_balance()}"

@router.get("/name")
def get_name(ledger: Ledger = Depends(get_ledger)) -> str:
    return f"SUCCESS: name={ledger.get_name()}"

@router.get("/deposit")
def deposit(
    amount: int = Depends(get_amount),
    idempotency_key: str = Depends(get_idempotency_key),
    ledger: Ledger = Depends(get_ledger),
) -> str:
    try:
        tx_id = ledger.deposit(amount, idempotency_key)
    except LedgerError as exc:
        raise ServiceError(ErrorKind.DEPOSIT_FAIL, str(exc)) from exc
    return f"SUCCESS: DEPOSIT_COMPLETE: transaction-id={tx_id}"

@router.get("/withdraw")
def withdraw(
    amount: int = Depends(get_amount),
    idempotency_key: str = Depends(get_idempotency_key),
    ledger: Ledger = Depends(get_ledger),
) -> str:
    try:
        tx_id = ledger.withdraw(amount, idempotency_key)
    except InsufficientFundsError as exc:
        raise ServiceError(ErrorKind.INSUFFICIENT_FUNDS, str(exc)) from exc
    except LedgerError as exc:
        raise ServiceError(ErrorKind.WITHDRAW_FAIL, str(exc)) from exc
    return f"SUCCESS: WITHDRAW_COMPLETE: transaction-id={tx_id}"

__all__ = ["router"]
