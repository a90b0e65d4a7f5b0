"""Report runs: /v1/reporting/report_runs"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import ListParams
from payments_client.contracts.report_runs import (
    ReportRun,
    ReportRunList,
    ReportRunListParams,
    ReportRunParams,
)
from payments_client.form import FormValues
from payments_client.iterator import ListIterator
from payments_client.resources.base import ResourceClient, format_url_path


class ReportRunIter(ListIterator[ReportRun]):
    def report_run(self) -> ReportRun:
        return self.current


class ReportRunClient(ResourceClient):
    def new(self, params: Optional[ReportRunParams] = None) -> ReportRun:
        """Start a report run. The run completes asynchronously; poll `get` for `status`."""
        return self.backend.call("POST", "/v1/reporting/report_runs", self.key, params, ReportRun)

    def get(self, id: str, params: Optional[ReportRunParams] = None) -> ReportRun:
        path = format_url_path("/v1/reporting/report_runs/%s", id)
        return self.backend.call("GET", path, self.key, params, ReportRun)

    def list(self, params: Optional[ReportRunListParams] = None) -> ReportRunIter:
        def query(form: FormValues, list_params: ListParams) -> ReportRunList:
            return self.backend.call_raw(
                "GET", "/v1/reporting/report_runs", self.key, form, list_params, ReportRunList
            )

        return ReportRunIter(params or ReportRunListParams(), query)
