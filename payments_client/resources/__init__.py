"""
Resource clients.

One client per API resource. Each holds a Backend and an API key and exposes
the operations the API offers for that resource:
- get(id)     -> one decoded resource
- new(params) -> the created resource
- list(...)   -> a lazy ListIterator (no request until the first next())
- delete(id)  -> the deleted resource (`deleted=True`)

Clients never call HTTP directly; everything goes through the backend.
"""

from .balance_transactions import BalanceTransactionClient, BalanceTransactionIter
from .base import ResourceClient, format_url_path
from .checkout_sessions import CheckoutSessionClient, CheckoutSessionIter
from .discounts import DiscountClient
from .exchange_rates import ExchangeRateClient, ExchangeRateIter
from .order_returns import OrderReturnClient, OrderReturnIter
from .report_runs import ReportRunClient, ReportRunIter
from .scheduled_query_runs import ScheduledQueryRunClient, ScheduledQueryRunIter
from .terminal import TerminalConnectionTokenClient

__all__ = [
    "BalanceTransactionClient", "BalanceTransactionIter",
    "CheckoutSessionClient", "CheckoutSessionIter",
    "DiscountClient",
    "ExchangeRateClient", "ExchangeRateIter",
    "OrderReturnClient", "OrderReturnIter",
    "ReportRunClient", "ReportRunIter",
    "ResourceClient", "format_url_path",
    "ScheduledQueryRunClient", "ScheduledQueryRunIter",
    "TerminalConnectionTokenClient",
]
