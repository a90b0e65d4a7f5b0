"""Pytest fixtures shared by the payments client tests."""

import pytest

from payments_client import ClientConfig, MockBackend, PaymentsClient


@pytest.fixture(autouse=True)
def _clear_payments_env(monkeypatch):
    """Keep PAYMENTS_* variables from the developer's shell out of the tests."""
    for name in (
        "PAYMENTS_API_KEY",
        "PAYMENTS_API_BASE",
        "PAYMENTS_API_VERSION",
        "PAYMENTS_TIMEOUT_SECONDS",
        "PAYMENTS_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return ClientConfig(api_key="sk_test_123")


@pytest.fixture
def backend():
    """In-memory MockBackend seeded with fixtures."""
    return MockBackend()


@pytest.fixture
def client(config, backend):
    return PaymentsClient(config, backend=backend)
