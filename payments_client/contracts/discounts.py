"""
Discount contracts.

A discount is a coupon applied to a customer or a subscription. It has no
endpoint of its own besides removal.
"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import APIResource, Params
from payments_client.contracts.references import Coupon


class DiscountParams(Params):
    pass


class Discount(APIResource):
    coupon: Optional[Coupon] = None
    customer: Optional[str] = None
    deleted: bool = False
    end: Optional[int] = None
    start: Optional[int] = None
    subscription: Optional[str] = None
