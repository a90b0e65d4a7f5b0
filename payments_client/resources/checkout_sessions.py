"""Checkout sessions: /v1/checkout/sessions"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import ListParams
from payments_client.contracts.checkout_sessions import (
    CheckoutSession,
    CheckoutSessionList,
    CheckoutSessionListParams,
    CheckoutSessionParams,
)
from payments_client.form import FormValues
from payments_client.iterator import ListIterator
from payments_client.resources.base import ResourceClient, format_url_path


class CheckoutSessionIter(ListIterator[CheckoutSession]):
    def checkout_session(self) -> CheckoutSession:
        """The checkout session the iterator is currently pointing to."""
        return self.current


class CheckoutSessionClient(ResourceClient):
    def new(self, params: Optional[CheckoutSessionParams] = None) -> CheckoutSession:
        """Create a checkout session."""
        return self.backend.call("POST", "/v1/checkout/sessions", self.key, params, CheckoutSession)

    def get(self, id: str, params: Optional[CheckoutSessionParams] = None) -> CheckoutSession:
        """Retrieve a checkout session."""
        path = format_url_path("/v1/checkout/sessions/%s", id)
        return self.backend.call("GET", path, self.key, params, CheckoutSession)

    def list(self, params: Optional[CheckoutSessionListParams] = None) -> CheckoutSessionIter:
        """Iterate over checkout sessions, newest first."""

        def query(form: FormValues, list_params: ListParams) -> CheckoutSessionList:
            return self.backend.call_raw(
                "GET", "/v1/checkout/sessions", self.key, form, list_params, CheckoutSessionList
            )

        return CheckoutSessionIter(params or CheckoutSessionListParams(), query)
