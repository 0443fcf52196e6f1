from .client import AccountClient
from .ledger import Ledger
from .monitor import AccountMonitor
from .repository import BalanceRepository

__all__ = ["AccountClient", "AccountMonitor", "BalanceRepository", "Ledger"]
