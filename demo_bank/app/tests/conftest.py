import pytest
from fastapi.testclient import TestClient

from ..main import create_app
from ..services import AccountClient, Ledger


@pytest.fixture
def ledger(tmp_path) -> Ledger:
    return Ledger("Test", data_dir=tmp_path)


@pytest.fixture
def client(ledger: Ledger) -> TestClient:
    with TestClient(create_app(ledger=ledger)) as test_client:
        yield test_client


@pytest.fixture
def account_client(client: TestClient) -> AccountClient:
    return AccountClient(http_client=client)
