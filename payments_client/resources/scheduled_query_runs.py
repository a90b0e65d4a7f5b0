"""Sigma scheduled query runs: /v1/sigma/scheduled_query_runs"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import ListParams
from payments_client.contracts.scheduled_query_runs import (
    ScheduledQueryRun,
    ScheduledQueryRunList,
    ScheduledQueryRunListParams,
    ScheduledQueryRunParams,
)
from payments_client.form import FormValues
from payments_client.iterator import ListIterator
from payments_client.resources.base import ResourceClient, format_url_path


class ScheduledQueryRunIter(ListIterator[ScheduledQueryRun]):
    def scheduled_query_run(self) -> ScheduledQueryRun:
        return self.current


class ScheduledQueryRunClient(ResourceClient):
    def get(self, id: str, params: Optional[ScheduledQueryRunParams] = None) -> ScheduledQueryRun:
        path = format_url_path("/v1/sigma/scheduled_query_runs/%s", id)
        return self.backend.call("GET", path, self.key, params, ScheduledQueryRun)

    def list(self, params: Optional[ScheduledQueryRunListParams] = None) -> ScheduledQueryRunIter:
        def query(form: FormValues, list_params: ListParams) -> ScheduledQueryRunList:
            return self.backend.call_raw(
                "GET", "/v1/sigma/scheduled_query_runs", self.key, form, list_params, ScheduledQueryRunList
            )

        return ScheduledQueryRunIter(params or ScheduledQueryRunListParams(), query)
