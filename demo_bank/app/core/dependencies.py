import re

from fastapi import Request

from ..models import ErrorKind
from ..services import Ledger
from .errors import ServiceError

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_AMOUNT = 2**63 - 1


def _first_query_value(request: Request, name: str):
    # repeated parameters: the first occurrence wins
    values = request.query_params.getlist(name)
    return values[0] if values else None


def get_ledger(request: Request) -> Ledger:
    return request.app.state.ledger


def get_amount(request: Request) -> int:
    amount = _first_query_value(request, "amount")
    if amount is None:
        raise ServiceError(ErrorKind.MISSING_AMOUNT_PARAM)
    if not _INTEGER.fullmatch(amount):
        raise ServiceError(ErrorKind.INVALID_AMOUNT)
    value = int(amount)
    if value < 1 or value > _MAX_AMOUNT:
        raise ServiceError(ErrorKind.INVALID_AMOUNT)
    return value


def get_idempotency_key(request: Request) -> str:
    return _first_query_value(request, "idempotency-key") or ""
