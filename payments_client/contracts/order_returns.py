"""
Order return contracts.

An order return records items returned from a paid order and the refund
issued for them.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from payments_client.contracts.base import (
    APIResource,
    ListObject,
    ListParams,
    Params,
    RangeQueryParams,
)
from payments_client.contracts.references import Order, Refund


class OrderReturnParams(Params):
    pass


class OrderReturnListParams(ListParams):
    created: Optional[RangeQueryParams] = None
    order: Optional[str] = None


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    parent: Optional[str] = None
    quantity: Optional[int] = None
    type: Optional[str] = None


class OrderReturn(APIResource):
    amount: Optional[int] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    items: List[OrderItem] = []
    livemode: Optional[bool] = None
    order: Optional[Order] = None
    refund: Optional[Refund] = None


class OrderReturnList(ListObject[OrderReturn]):
    pass
