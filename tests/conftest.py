from datetime import date

import pytest
from fastapi.testclient import TestClient

from leave_service.core.deps import build_store, get_directory, get_ledger
from leave_service.main import app

# Fixed "today" so the 2025 dates used throughout are never in the past.
TODAY = date(2025, 1, 1)


@pytest.fixture
def store():
    return build_store(today=lambda: TODAY)


@pytest.fixture
def directory(store):
    return store[0]


@pytest.fixture
def ledger(store):
    return store[1]


@pytest.fixture
def client(directory, ledger):
    app.dependency_overrides[get_directory] = lambda: directory
    app.dependency_overrides[get_ledger] = lambda: ledger
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
