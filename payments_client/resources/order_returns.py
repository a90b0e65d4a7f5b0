"""Order returns: /v1/order_returns"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import ListParams
from payments_client.contracts.order_returns import (
    OrderReturn,
    OrderReturnList,
    OrderReturnListParams,
    OrderReturnParams,
)
from payments_client.form import FormValues
from payments_client.iterator import ListIterator
from payments_client.resources.base import ResourceClient, format_url_path


class OrderReturnIter(ListIterator[OrderReturn]):
    def order_return(self) -> OrderReturn:
        """The order return the iterator is currently pointing to."""
        return self.current


class OrderReturnClient(ResourceClient):
    def get(self, id: str, params: Optional[OrderReturnParams] = None) -> OrderReturn:
        """Retrieve the details of an order return."""
        path = format_url_path("/v1/order_returns/%s", id)
        return self.backend.call("GET", path, self.key, params, OrderReturn)

    def list(self, params: Optional[OrderReturnListParams] = None) -> OrderReturnIter:
        """Iterate over order returns."""

        def query(form: FormValues, list_params: ListParams) -> OrderReturnList:
            return self.backend.call_raw("GET", "/v1/order_returns", self.key, form, list_params, OrderReturnList)

        return OrderReturnIter(params or OrderReturnListParams(), query)
