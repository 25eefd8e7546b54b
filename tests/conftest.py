"""
Test configuration and fixtures for the FastAPI URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from main import app
from shorturl_app.dependencies import get_address_store
from shorturl_app.store.strategies import InMemoryAddressStore


@pytest.fixture(scope="function")
def store():
    """
    Create a fresh address store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return InMemoryAddressStore()


@pytest.fixture(scope="function")
def client(store):
    """
    Create a test client with the address store dependency overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_address_store] = lambda: store
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()
