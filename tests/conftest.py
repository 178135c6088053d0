import pytest
from fastapi.testclient import TestClient

from votingsystem.main import create_app
from votingsystem.storage import ElectionLedger


@pytest.fixture
def ledger():
    return ElectionLedger()


@pytest.fixture
def alice_bob(ledger):
    """Ledger with Alice and Bob registered, in that order."""
    alice = ledger.register_candidate("Alice", "First candidate").candidate
    bob = ledger.register_candidate("Bob").candidate
    return ledger, alice, bob


@pytest.fixture
def client(ledger):
    return TestClient(create_app(ledger))
