import pytest

from payments_client import ClientConfig, HTTPBackend, MockBackend, PaymentsClient
from payments_client.contracts import OrderReturnListParams
from payments_client.errors import AuthenticationError
from payments_client.resources import OrderReturnClient, TerminalConnectionTokenClient


class ClosingMockBackend(MockBackend):
    def __init__(self):
        super().__init__()
        self.closed = 0

    def close(self):
        self.closed += 1


def test_resource_clients_share_backend_and_key(client, backend):
    resource_clients = [
        client.balance_transactions,
        client.checkout_sessions,
        client.discounts,
        client.exchange_rates,
        client.order_returns,
        client.report_runs,
        client.scheduled_query_runs,
        client.terminal_connection_tokens,
    ]

    assert all(rc.backend is backend for rc in resource_clients)
    assert all(rc.key == "sk_test_123" for rc in resource_clients)


def test_requests_carry_configured_key(client, backend):
    client.order_returns.get("orret_123")

    assert backend.requests[-1].key == "sk_test_123"


def test_default_backend_is_http():
    client = PaymentsClient(ClientConfig(api_key="sk_test_123"))
    try:
        assert isinstance(client.backend, HTTPBackend)
    finally:
        client.close()


def test_missing_key_raises_authentication_error():
    client = PaymentsClient(ClientConfig(), backend=MockBackend())

    with pytest.raises(AuthenticationError):
        client.exchange_rates.get("usd")


def test_missing_key_surfaces_through_iterator():
    client = PaymentsClient(ClientConfig(), backend=MockBackend())

    i = client.order_returns.list(OrderReturnListParams())

    assert i.next() is False
    assert isinstance(i.err, AuthenticationError)


def test_context_manager_closes_backend(config):
    backend = ClosingMockBackend()

    with PaymentsClient(config, backend=backend) as client:
        client.terminal_connection_tokens.new()

    assert backend.closed == 1


def test_resource_client_from_config(config, backend):
    order_returns = OrderReturnClient.from_config(config, backend=backend)

    assert order_returns.key == "sk_test_123"
    assert order_returns.get("orret_456").amount == 700


def test_resource_client_from_config_defaults_to_http(config):
    tokens = TerminalConnectionTokenClient.from_config(config)
    try:
        assert isinstance(tokens.backend, HTTPBackend)
    finally:
        tokens.backend.close()
