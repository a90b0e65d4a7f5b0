"""
Resources that appear as expandable references on other resources.

Only the fields clients commonly read are modelled; unknown keys are ignored.
Each of these may be a bare ID or the full object depending on `expand`.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import ConfigDict

from payments_client.contracts.base import ExpandableResource


class Customer(ExpandableResource):
    created: Optional[int] = None
    currency: Optional[str] = None
    deleted: Optional[bool] = None
    description: Optional[str] = None
    email: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Optional[Dict[str, str]] = None
    name: Optional[str] = None


class PaymentIntent(ExpandableResource):
    amount: Optional[int] = None
    capture_method: Optional[str] = None
    client_secret: Optional[str] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[Customer] = None
    description: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Optional[Dict[str, str]] = None
    status: Optional[str] = None


class SetupIntent(ExpandableResource):
    client_secret: Optional[str] = None
    created: Optional[int] = None
    customer: Optional[Customer] = None
    description: Optional[str] = None
    livemode: Optional[bool] = None
    status: Optional[str] = None
    usage: Optional[str] = None


class Plan(ExpandableResource):
    active: Optional[bool] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    interval: Optional[str] = None
    interval_count: Optional[int] = None
    nickname: Optional[str] = None
    product: Optional[str] = None


class SKU(ExpandableResource):
    active: Optional[bool] = None
    currency: Optional[str] = None
    price: Optional[int] = None
    product: Optional[str] = None


class Subscription(ExpandableResource):
    cancel_at_period_end: Optional[bool] = None
    created: Optional[int] = None
    current_period_end: Optional[int] = None
    current_period_start: Optional[int] = None
    customer: Optional[Customer] = None
    livemode: Optional[bool] = None
    plan: Optional[Plan] = None
    status: Optional[str] = None


class Coupon(ExpandableResource):
    amount_off: Optional[int] = None
    currency: Optional[str] = None
    duration: Optional[str] = None
    duration_in_months: Optional[int] = None
    name: Optional[str] = None
    percent_off: Optional[float] = None
    valid: Optional[bool] = None


class Order(ExpandableResource):
    amount: Optional[int] = None
    amount_returned: Optional[int] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[Customer] = None
    email: Optional[str] = None
    status: Optional[str] = None


class Refund(ExpandableResource):
    amount: Optional[int] = None
    charge: Optional[str] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None


class File(ExpandableResource):
    created: Optional[int] = None
    filename: Optional[str] = None
    purpose: Optional[str] = None
    size: Optional[int] = None
    title: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None


class BalanceTransactionSource(ExpandableResource):
    """
    The object that caused a balance transaction (charge, refund, payout, ...).

    Its shape depends on `object`, so every extra key is kept as-is.
    """

    model_config = ConfigDict(extra="allow")


__all__: List[str] = [
    "BalanceTransactionSource",
    "Coupon",
    "Customer",
    "File",
    "Order",
    "PaymentIntent",
    "Plan",
    "Refund",
    "SKU",
    "SetupIntent",
    "Subscription",
]
