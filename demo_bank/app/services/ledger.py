from __future__ import annotations

import logging
import random
import string
import threading
from pathlib import Path
from typing import Dict, Optional

from ..core.errors import InsufficientFundsError, InvalidAmountError
from .repository import BalanceRepository


logger = logging.getLogger(__name__)

TRANSACTION_ID_DIGITS = 10


def generate_transaction_id(prefix: str, length: int = TRANSACTION_ID_DIGITS) -> str:
    return prefix + "".join(random.choices(string.digits, k=length))


class Ledger:
    """Balance and idempotency state for the single account a service owns.

    Idempotency keys only live as long as this instance. They are not
    written to disk, so a key used before a restart is unknown after it.
    """

    def __init__(
        self,
        name: str,
        data_dir: Optional[Path] = None,
        repository: Optional[BalanceRepository] = None,
    ) -> None:
        self._name = name
        self._data_dir = Path(data_dir) if data_dir is not None else None
        self.repository = repository or BalanceRepository(self.get_data_path())
        self._lock = threading.Lock()
        self._requests: Dict[str, str] = {}
        self._balance = self.repository.load()
        logger.info(
            "account.loaded",
            extra={"account": name, "balance": self._balance},
        )

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    @staticmethod
    def _check_amount(amount: int) -> None:
        if amount < 1:
            raise InvalidAmountError(f"Invalid amount: {amount}")

    def _previous_transaction(self, route: str, idempotency_key: str) -> Optional[str]:
        if not idempotency_key:
            return None

        tx_id = self._requests.get(idempotency_key)
        if tx_id is not None:
            logger.info(
                f"idempotent.{route}.hit",
                extra={"idempotency_key": idempotency_key, "transaction_id": tx_id},
            )
        return tx_id

    def _apply(self, new_balance: int, prefix: str, idempotency_key: str) -> str:
        # Caller holds the lock. The new balance stays in memory even if
        # the save below fails.
        self._balance = new_balance
        tx_id = generate_transaction_id(prefix)
        if idempotency_key:
            self._requests[idempotency_key] = tx_id
        self.repository.save(self._balance)
        return tx_id

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_name(self) -> str:
        return self._name

    def get_balance(self) -> int:
        return self._balance

    def get_data_path(self) -> Path:
        data_dir = self._data_dir if self._data_dir is not None else Path.cwd()
        # TODO: strip characters that are not valid in file names
        return data_dir.absolute() / f"bank-{self._name.lower()}.dat"

    def deposit(self, amount: int, idempotency_key: str = "") -> str:
        self._check_amount(amount)

        with self._lock:
            previous = self._previous_transaction("deposit", idempotency_key)
            if previous is not None:
                return previous

            tx_id = self._apply(self._balance + amount, "D", idempotency_key)
            balance = self._balance

        logger.info(
            "account.deposit",
            extra={
                "account": self._name,
                "amount": amount,
                "balance": balance,
                "transaction_id": tx_id,
            },
        )
        return tx_id

    def withdraw(self, amount: int, idempotency_key: str = "") -> str:
        self._check_amount(amount)

        with self._lock:
            if amount > self._balance:
                raise InsufficientFundsError(
                    f"withdrawal amount ${amount} exceeds balance ${self._balance}",
                    amount=amount,
                    balance=self._balance,
                )

            previous = self._previous_transaction("withdraw", idempotency_key)
            if previous is not None:
                return previous

            tx_id = self._apply(self._balance - amount, "W", idempotency_key)
            balance = self._balance

        logger.info(
            "account.withdraw",
            extra={
                "account": self._name,
                "amount": amount,
                "balance": balance,
                "transaction_id": tx_id,
            },
        )
        return tx_id
