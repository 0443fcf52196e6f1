import httpx

from ..models import AccountSnapshot
from ..services import AccountClient, AccountMonitor, Ledger


def _offline_client() -> AccountClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return AccountClient(
        http_client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://down.test")
    )


def test_snapshot_reports_each_service(account_client: AccountClient, ledger: Ledger) -> None:
    ledger.deposit(1500)
    monitor = AccountMonitor([account_client, _offline_client()])

    online, offline = monitor.snapshot()

    assert online == AccountSnapshot(name="Test", balance=1500, online=True)
    assert online.balance_label == "Balance: $1500.00"
    assert online.status_label == "Service Status: Online"

    assert offline == AccountSnapshot(name="UNKNOWN", balance=None, online=False)
    assert offline.balance_label == "Balance: $????.??"
    assert offline.status_label == "Service Status: Offline"


def test_watch_yields_fresh_snapshots(account_client: AccountClient, ledger: Ledger) -> None:
    monitor = AccountMonitor([account_client])
    balances = []

    for round_number, snapshots in enumerate(monitor.watch(interval=0, iterations=3)):
        balances.append(snapshots[0].balance)
        ledger.deposit(round_number + 1)

    assert balances == [0, 1, 3]


def test_poll_errors_are_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="ERROR: internal")

    client = AccountClient(
        http_client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://flaky.test")
    )

    (snapshot,) = AccountMonitor([client]).snapshot()
    assert snapshot.online is True
    assert snapshot.balance is None
