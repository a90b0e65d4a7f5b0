"""Exchange rates: /v1/exchange_rates. Rates are keyed by lowercase currency code."""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import ListParams
from payments_client.contracts.exchange_rates import (
    ExchangeRate,
    ExchangeRateList,
    ExchangeRateListParams,
    ExchangeRateParams,
)
from payments_client.form import FormValues
from payments_client.iterator import ListIterator
from payments_client.resources.base import ResourceClient, format_url_path


class ExchangeRateIter(ListIterator[ExchangeRate]):
    def exchange_rate(self) -> ExchangeRate:
        return self.current


class ExchangeRateClient(ResourceClient):
    def get(self, currency: str, params: Optional[ExchangeRateParams] = None) -> ExchangeRate:
        """Retrieve the rates for one base currency, e.g. `usd`."""
        path = format_url_path("/v1/exchange_rates/%s", currency.lower())
        return self.backend.call("GET", path, self.key, params, ExchangeRate)

    def list(self, params: Optional[ExchangeRateListParams] = None) -> ExchangeRateIter:
        def query(form: FormValues, list_params: ListParams) -> ExchangeRateList:
            return self.backend.call_raw("GET", "/v1/exchange_rates", self.key, form, list_params, ExchangeRateList)

        return ExchangeRateIter(params or ExchangeRateListParams(), query)
