from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import NonNegativeInt, TypeAdapter, ValidationError

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)

_balance_adapter = TypeAdapter(NonNegativeInt)


class BalanceRepository:
    """Stores one account balance as a bare JSON integer in a file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> int:
        if not self.path.exists():
            return 0

        logger.info("account.loading", extra={"path": str(self.path)})
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            logger.error("account.load_failed", extra={"path": str(self.path)})
            raise PersistenceError(f"could not read {self.path}: {exc}") from exc

        try:
            return _balance_adapter.validate_json(raw, strict=True)
        except ValidationError as exc:
            logger.error("account.corrupt_record", extra={"path": str(self.path)})
            raise PersistenceError(f"corrupt balance record in {self.path}") from exc

    def save(self, balance: int) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(balance))
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            logger.error("account.save_failed", extra={"path": str(self.path)})
            raise PersistenceError(f"could not write {self.path}: {exc}") from exc
        logger.debug("account.saved", extra={"path": str(self.path), "balance": balance})
