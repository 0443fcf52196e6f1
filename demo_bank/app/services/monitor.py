from __future__ import annotations

import logging
import time
from typing import Iterator, List, Optional, Sequence

from ..core.errors import AccountServiceError
from ..models import AccountSnapshot
from .client import AccountClient


logger = logging.getLogger(__name__)


class AccountMonitor:
    """Polls a fixed set of account services for name, balance and status."""

    def __init__(self, clients: Sequence[AccountClient]) -> None:
        self.clients = list(clients)

    def _snapshot_one(self, client: AccountClient) -> AccountSnapshot:
        snapshot = AccountSnapshot(online=client.is_service_running())
        if not snapshot.online:
            return snapshot

        try:
            snapshot.name = client.get_name()
            snapshot.balance = client.get_balance()
        except AccountServiceError as exc:
            logger.warning(
                "monitor.poll_failed",
                extra={"host": client.host, "port": client.port, "error": str(exc)},
            )
        return snapshot

    def snapshot(self) -> List[AccountSnapshot]:
        return [self._snapshot_one(client) for client in self.clients]

    def watch(
        self,
        interval: float = 0.5,
        iterations: Optional[int] = None,
    ) -> Iterator[List[AccountSnapshot]]:
        count = 0
        while iterations is None or count < iterations:
            if count:
                time.sleep(interval)
            yield self.snapshot()
            count += 1
