"""Balance transactions: /v1/balance/history"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.balance_transactions import (
    BalanceTransaction,
    BalanceTransactionList,
    BalanceTransactionListParams,
    BalanceTransactionParams,
)
from payments_client.contracts.base import ListParams
from payments_client.form import FormValues
from payments_client.iterator import ListIterator
from payments_client.resources.base import ResourceClient, format_url_path


class BalanceTransactionIter(ListIterator[BalanceTransaction]):
    def balance_transaction(self) -> BalanceTransaction:
        """The balance transaction the iterator is currently pointing to."""
        return self.current


class BalanceTransactionClient(ResourceClient):
    def get(self, id: str, params: Optional[BalanceTransactionParams] = None) -> BalanceTransaction:
        """Retrieve a balance transaction."""
        path = format_url_path("/v1/balance/history/%s", id)
        return self.backend.call("GET", path, self.key, params, BalanceTransaction)

    def list(self, params: Optional[BalanceTransactionListParams] = None) -> BalanceTransactionIter:
        def query(form: FormValues, list_params: ListParams) -> BalanceTransactionList:
            return self.backend.call_raw(
                "GET", "/v1/balance/history", self.key, form, list_params, BalanceTransactionList
            )

        return BalanceTransactionIter(params or BalanceTransactionListParams(), query)
