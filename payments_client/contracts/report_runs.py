"""
Report run contracts (reporting API).

A report run is one execution of a report type over a time interval; when
it succeeds, `result` points at the generated file.
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
from payments_client.contracts.references import File


class ReportRunStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ReportRunParametersParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    columns: Optional[List[str]] = None
    connected_account: Optional[str] = None
    currency: Optional[str] = None
    interval_end: Optional[int] = None
    interval_start: Optional[int] = None
    payout: Optional[str] = None
    reporting_category: Optional[str] = None
    timezone: Optional[str] = None


class ReportRunParams(Params):
    parameters: Optional[ReportRunParametersParams] = None
    report_type: Optional[str] = None


class ReportRunListParams(ListParams):
    created: Optional[RangeQueryParams] = None


class ReportRunParameters(BaseModel):
    model_config = ConfigDict(extra="ignore")

    columns: Optional[List[str]] = None
    connected_account: Optional[str] = None
    currency: Optional[str] = None
    interval_end: Optional[int] = None
    interval_start: Optional[int] = None
    payout: Optional[str] = None
    reporting_category: Optional[str] = None
    timezone: Optional[str] = None


class ReportRun(APIResource):
    created: Optional[int] = None
    error: Optional[str] = None
    livemode: Optional[bool] = None
    parameters: Optional[ReportRunParameters] = None
    report_type: Optional[str] = None
    result: Optional[File] = None
    status: Optional[Union[ReportRunStatus, str]] = Field(default=None, union_mode="left_to_right")
    succeeded_at: Optional[int] = None


class ReportRunList(ListObject[ReportRun]):
    pass
