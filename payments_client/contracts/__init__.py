"""
Contracts (data models).

This package defines the request/response shapes of the payments API:
- request parameter models, one per operation (form-encoded on the way out)
- resource models, one per API object (decoded from JSON on the way in)
- the shared `list` envelope and the expandable-reference base class

Why this exists:
- Resource clients, the HTTP backend and the mock backend all speak these models
- Callers get typed objects instead of ad-hoc dicts

Both mock and real backends must return data shaped by these contracts.
"""

from .base import (
    APIResource,
    ExpandableResource,
    ListMeta,
    ListObject,
    ListParams,
    Params,
    RangeQueryParams,
    decode_resource,
)
from .references import (
    BalanceTransactionSource,
    Coupon,
    Customer,
    File,
    Order,
    PaymentIntent,
    Plan,
    Refund,
    SKU,
    SetupIntent,
    Subscription,
)
from .balance_transactions import (
    BalanceTransaction,
    BalanceTransactionFee,
    BalanceTransactionList,
    BalanceTransactionListParams,
    BalanceTransactionParams,
    BalanceTransactionStatus,
)
from .checkout_sessions import (
    AddressParams,
    CheckoutSession,
    CheckoutSessionDisplayItem,
    CheckoutSessionDisplayItemCustom,
    CheckoutSessionDisplayItemType,
    CheckoutSessionLineItemAdjustableQuantityParams,
    CheckoutSessionLineItemParams,
    CheckoutSessionLineItemPriceDataParams,
    CheckoutSessionLineItemPriceDataProductDataParams,
    CheckoutSessionLineItemPriceDataRecurringParams,
    CheckoutSessionList,
    CheckoutSessionListParams,
    CheckoutSessionMode,
    CheckoutSessionParams,
    CheckoutSessionPaymentIntentDataParams,
    CheckoutSessionPaymentIntentDataTransferDataParams,
    CheckoutSessionSetupIntentDataParams,
    CheckoutSessionSubmitType,
    CheckoutSessionSubscriptionDataItemsParams,
    CheckoutSessionSubscriptionDataParams,
    ShippingDetailsParams,
)
from .discounts import Discount, DiscountParams
from .exchange_rates import ExchangeRate, ExchangeRateList, ExchangeRateListParams, ExchangeRateParams
from .order_returns import OrderItem, OrderReturn, OrderReturnList, OrderReturnListParams, OrderReturnParams
from .report_runs import (
    ReportRun,
    ReportRunList,
    ReportRunListParams,
    ReportRunParameters,
    ReportRunParametersParams,
    ReportRunParams,
    ReportRunStatus,
)
from .scheduled_query_runs import (
    ScheduledQueryRun,
    ScheduledQueryRunError,
    ScheduledQueryRunList,
    ScheduledQueryRunListParams,
    ScheduledQueryRunParams,
    ScheduledQueryRunStatus,
)
from .terminal import TerminalConnectionToken, TerminalConnectionTokenParams

__all__ = [
    # base
    "APIResource", "ExpandableResource", "ListMeta", "ListObject",
    "ListParams", "Params", "RangeQueryParams", "decode_resource",
    # references
    "BalanceTransactionSource", "Coupon", "Customer", "File", "Order", "PaymentIntent",
    "Plan", "Refund", "SKU", "SetupIntent", "Subscription",
    # balance transactions
    "BalanceTransaction", "BalanceTransactionFee", "BalanceTransactionList",
    "BalanceTransactionListParams", "BalanceTransactionParams", "BalanceTransactionStatus",
    # checkout sessions
    "AddressParams", "CheckoutSession", "CheckoutSessionDisplayItem",
    "CheckoutSessionDisplayItemCustom", "CheckoutSessionDisplayItemType",
    "CheckoutSessionLineItemAdjustableQuantityParams", "CheckoutSessionLineItemParams",
    "CheckoutSessionLineItemPriceDataParams", "CheckoutSessionLineItemPriceDataProductDataParams",
    "CheckoutSessionLineItemPriceDataRecurringParams", "CheckoutSessionList",
    "CheckoutSessionListParams", "CheckoutSessionMode", "CheckoutSessionParams",
    "CheckoutSessionPaymentIntentDataParams", "CheckoutSessionPaymentIntentDataTransferDataParams",
    "CheckoutSessionSetupIntentDataParams", "CheckoutSessionSubmitType",
    "CheckoutSessionSubscriptionDataItemsParams", "CheckoutSessionSubscriptionDataParams",
    "ShippingDetailsParams",
    # discounts
    "Discount", "DiscountParams",
    # exchange rates
    "ExchangeRate", "ExchangeRateList", "ExchangeRateListParams", "ExchangeRateParams",
    # order returns
    "OrderItem", "OrderReturn", "OrderReturnList", "OrderReturnListParams", "OrderReturnParams",
    # report runs
    "ReportRun", "ReportRunList", "ReportRunListParams", "ReportRunParameters",
    "ReportRunParametersParams", "ReportRunParams", "ReportRunStatus",
    # scheduled query runs
    "ScheduledQueryRun", "ScheduledQueryRunError", "ScheduledQueryRunList",
    "ScheduledQueryRunListParams", "ScheduledQueryRunParams", "ScheduledQueryRunStatus",
    # terminal
    "TerminalConnectionToken", "TerminalConnectionTokenParams",
]
