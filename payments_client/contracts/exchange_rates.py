"""Exchange rate contracts. The resource ID is the lowercase base currency code."""

from __future__ import annotations

from typing import Dict

from payments_client.contracts.base import APIResource, ListObject, ListParams, Params


class ExchangeRateParams(Params):
    pass


class ExchangeRateListParams(ListParams):
    pass


class ExchangeRate(APIResource):
    rates: Dict[str, float] = {}


class ExchangeRateList(ListObject[ExchangeRate]):
    pass
