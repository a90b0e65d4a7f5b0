"""Scheduled query run contracts (Sigma). Each run is one execution of a saved SQL query."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from payments_client.contracts.base import APIResource, ListObject, ListParams, Params
from payments_client.contracts.references import File


class ScheduledQueryRunStatus(str, Enum):
    CANCELED = "canceled"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class ScheduledQueryRunParams(Params):
    pass


class ScheduledQueryRunListParams(ListParams):
    pass


class ScheduledQueryRunError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None


class ScheduledQueryRun(APIResource):
    created: Optional[int] = None
    data_load_time: Optional[int] = None
    error: Optional[ScheduledQueryRunError] = None
    file: Optional[File] = None
    livemode: Optional[bool] = None
    result_available_until: Optional[int] = None
    sql: Optional[str] = None
    status: Optional[Union[ScheduledQueryRunStatus, str]] = Field(default=None, union_mode="left_to_right")
    title: Optional[str] = None


class ScheduledQueryRunList(ListObject[ScheduledQueryRun]):
    pass
