"""
Client facade.

Wires one backend into every resource client. This is the single place where
the choice between the live HTTP backend and the mock backend is made:

    client = PaymentsClient(config_from_env())                  # live API
    client = PaymentsClient(ClientConfig(api_key="sk_test"), backend=MockBackend())
"""

from __future__ import annotations

import logging
from typing import Optional

from payments_client.backends import Backend, get_backend
from payments_client.config import ClientConfig
from payments_client.resources import (
    BalanceTransactionClient,
    CheckoutSessionClient,
    DiscountClient,
    ExchangeRateClient,
    OrderReturnClient,
    ReportRunClient,
    ScheduledQueryRunClient,
    TerminalConnectionTokenClient,
)

logger = logging.getLogger(__name__)


class PaymentsClient:
    def __init__(self, config: Optional[ClientConfig] = None, backend: Optional[Backend] = None) -> None:
        self.config = config or ClientConfig()
        self.backend = backend or get_backend(self.config)
        key = self.config.api_key

        self.balance_transactions = BalanceTransactionClient(self.backend, key)
        self.checkout_sessions = CheckoutSessionClient(self.backend, key)
        self.discounts = DiscountClient(self.backend, key)
        self.exchange_rates = ExchangeRateClient(self.backend, key)
        self.order_returns = OrderReturnClient(self.backend, key)
        self.report_runs = ReportRunClient(self.backend, key)
        self.scheduled_query_runs = ScheduledQueryRunClient(self.backend, key)
        self.terminal_connection_tokens = TerminalConnectionTokenClient(self.backend, key)

        logger.info(
            "Payments client ready: backend=%s api_base=%s key=%s",
            type(self.backend).__name__,
            self.config.api_base,
            self.config.masked_key(),
        )

    def close(self) -> None:
        self.backend.close()

    def __enter__(self) -> "PaymentsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
