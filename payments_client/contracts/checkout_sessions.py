"""
Checkout session contracts.

A checkout session is the hosted payment page the customer is redirected to.
Depending on `mode` it collects a one-off payment, saves a payment method
for later (setup) or starts a subscription.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from payments_client.contracts.base import ExpandableResource, ListObject, ListParams, Params
from payments_client.contracts.references import (
    Customer,
    PaymentIntent,
    Plan,
    SKU,
    SetupIntent,
    Subscription,
)


# ---------------------------------------------------------------------------
# Enums (response fields also accept values not listed here)
# ---------------------------------------------------------------------------

class CheckoutSessionSubmitType(str, Enum):
    AUTO = "auto"
    BOOK = "book"
    DONATE = "donate"
    PAY = "pay"


class CheckoutSessionDisplayItemType(str, Enum):
    CUSTOM = "custom"
    PLAN = "plan"
    SKU = "sku"


class CheckoutSessionMode(str, Enum):
    PAYMENT = "payment"
    SETUP = "setup"
    SUBSCRIPTION = "subscription"


# ---------------------------------------------------------------------------
# Request parameters
# ---------------------------------------------------------------------------

class _NestedParams(BaseModel):
    model_config = ConfigDict(extra="forbid")


class AddressParams(_NestedParams):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class ShippingDetailsParams(_NestedParams):
    address: Optional[AddressParams] = None
    carrier: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    tracking_number: Optional[str] = None


class CheckoutSessionLineItemAdjustableQuantityParams(_NestedParams):
    enabled: Optional[bool] = None
    maximum: Optional[int] = None
    minimum: Optional[int] = None


class CheckoutSessionLineItemPriceDataRecurringParams(_NestedParams):
    interval: Optional[str] = None
    interval_count: Optional[int] = None


class CheckoutSessionLineItemPriceDataProductDataParams(_NestedParams):
    description: Optional[str] = None
    images: Optional[List[str]] = None
    metadata: Optional[dict] = None
    name: Optional[str] = None


class CheckoutSessionLineItemPriceDataParams(_NestedParams):
    currency: Optional[str] = None
    product: Optional[str] = None
    product_data: Optional[CheckoutSessionLineItemPriceDataProductDataParams] = None
    recurring: Optional[CheckoutSessionLineItemPriceDataRecurringParams] = None
    unit_amount: Optional[int] = None
    unit_amount_decimal: Optional[float] = None


class CheckoutSessionLineItemParams(_NestedParams):
    """
    One line item. Pass `price` or `price_data`; the legacy
    amount/currency/name/description/images fields are still accepted.
    """

    adjustable_quantity: Optional[CheckoutSessionLineItemAdjustableQuantityParams] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    dynamic_tax_rates: Optional[List[str]] = None
    images: Optional[List[str]] = None
    name: Optional[str] = None
    price: Optional[str] = None
    price_data: Optional[CheckoutSessionLineItemPriceDataParams] = None
    quantity: Optional[int] = None
    tax_rates: Optional[List[str]] = None


class CheckoutSessionPaymentIntentDataTransferDataParams(_NestedParams):
    destination: Optional[str] = None


class CheckoutSessionPaymentIntentDataParams(Params):
    application_fee_amount: Optional[int] = None
    capture_method: Optional[str] = None
    description: Optional[str] = None
    on_behalf_of: Optional[str] = None
    receipt_email: Optional[str] = None
    setup_future_usage: Optional[str] = None
    shipping: Optional[ShippingDetailsParams] = None
    statement_descriptor: Optional[str] = None
    transfer_data: Optional[CheckoutSessionPaymentIntentDataTransferDataParams] = None


class CheckoutSessionSetupIntentDataParams(Params):
    description: Optional[str] = None
    on_behalf_of: Optional[str] = None


class CheckoutSessionSubscriptionDataItemsParams(_NestedParams):
    plan: Optional[str] = None
    quantity: Optional[int] = None


class CheckoutSessionSubscriptionDataParams(Params):
    application_fee_percent: Optional[float] = None
    items: Optional[List[CheckoutSessionSubscriptionDataItemsParams]] = None
    trial_end: Optional[int] = None
    trial_from_plan: Optional[bool] = None
    trial_period_days: Optional[int] = None


class CheckoutSessionParams(Params):
    billing_address_collection: Optional[str] = None
    cancel_url: Optional[str] = None
    client_reference_id: Optional[str] = None
    customer: Optional[str] = None
    customer_email: Optional[str] = None
    line_items: Optional[List[CheckoutSessionLineItemParams]] = None
    locale: Optional[str] = None
    mode: Optional[CheckoutSessionMode] = None
    payment_intent_data: Optional[CheckoutSessionPaymentIntentDataParams] = None
    payment_method_types: Optional[List[str]] = None
    setup_intent_data: Optional[CheckoutSessionSetupIntentDataParams] = None
    subscription_data: Optional[CheckoutSessionSubscriptionDataParams] = None
    submit_type: Optional[CheckoutSessionSubmitType] = None
    success_url: Optional[str] = None


class CheckoutSessionListParams(ListParams):
    payment_intent: Optional[str] = None
    subscription: Optional[str] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class CheckoutSessionDisplayItemCustom(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = None
    images: List[str] = []
    name: Optional[str] = None


class CheckoutSessionDisplayItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    amount: Optional[int] = None
    currency: Optional[str] = None
    custom: Optional[CheckoutSessionDisplayItemCustom] = None
    quantity: Optional[int] = None
    plan: Optional[Plan] = None
    sku: Optional[SKU] = None
    type: Optional[Union[CheckoutSessionDisplayItemType, str]] = Field(default=None, union_mode="left_to_right")


class CheckoutSession(ExpandableResource):
    cancel_url: Optional[str] = None
    client_reference_id: Optional[str] = None
    customer: Optional[Customer] = None
    customer_email: Optional[str] = None
    deleted: Optional[bool] = None
    display_items: Optional[List[CheckoutSessionDisplayItem]] = None
    livemode: Optional[bool] = None
    locale: Optional[str] = None
    metadata: Optional[dict] = None
    mode: Optional[Union[CheckoutSessionMode, str]] = Field(default=None, union_mode="left_to_right")
    payment_intent: Optional[PaymentIntent] = None
    payment_method_types: Optional[List[str]] = None
    setup_intent: Optional[SetupIntent] = None
    subscription: Optional[Subscription] = None
    submit_type: Optional[Union[CheckoutSessionSubmitType, str]] = Field(default=None, union_mode="left_to_right")
    success_url: Optional[str] = None


class CheckoutSessionList(ListObject[CheckoutSession]):
    pass
