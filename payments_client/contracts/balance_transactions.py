"""
Balance transaction contracts.

Balance transactions record every movement of funds in or out of the
account balance (charges, refunds, payouts, fees, ...).
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from payments_client.contracts.base import (
    APIResource,
    ListObject,
    ListParams,
    Params,
    RangeQueryParams,
)
from payments_client.contracts.references import BalanceTransactionSource


class BalanceTransactionStatus(str, Enum):
    AVAILABLE = "available"
    PENDING = "pending"


class BalanceTransactionParams(Params):
    pass


class BalanceTransactionListParams(ListParams):
    available_on: Optional[RangeQueryParams] = None
    created: Optional[RangeQueryParams] = None
    currency: Optional[str] = None
    payout: Optional[str] = None
    source: Optional[str] = None
    type: Optional[str] = None


class BalanceTransactionFee(BaseModel):
    model_config = ConfigDict(extra="ignore")

    amount: Optional[int] = None
    application: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None


class BalanceTransaction(APIResource):
    amount: Optional[int] = None
    available_on: Optional[int] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    exchange_rate: Optional[float] = None
    fee: Optional[int] = None
    fee_details: List[BalanceTransactionFee] = []
    net: Optional[int] = None
    reporting_category: Optional[str] = None
    source: Optional[BalanceTransactionSource] = None
    status: Optional[Union[BalanceTransactionStatus, str]] = Field(default=None, union_mode="left_to_right")
    type: Optional[str] = None


class BalanceTransactionList(ListObject[BalanceTransaction]):
    pass
