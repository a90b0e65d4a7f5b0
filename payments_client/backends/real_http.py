"""
Real HTTP backend.

Used whenever the client talks to the live API (or any compatible server).

Implementation notes:
- httpx.Client, one connection pool per backend
- GET/DELETE send form values in the query string, POST sends them as an
  application/x-www-form-urlencoded body
- Non-2xx responses are mapped to payments_client.errors types; nothing is retried

Important:
- Keep this module as the ONLY place where HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type

import httpx
from pydantic import BaseModel

from payments_client.backends.base import Backend, ResultT
from payments_client.config import ClientConfig
from payments_client.contracts.base import decode_resource
from payments_client.errors import (
    AuthenticationError,
    PaymentsClientError,
    TransportError,
    api_error_from_response,
)
from payments_client.form import FormValues

logger = logging.getLogger(__name__)

_QUERY_METHODS = {"GET", "DELETE"}


class HTTPBackend(Backend):
    def __init__(self, config: ClientConfig, http_client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self.api_base = config.api_base.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=httpx.Timeout(config.timeout_seconds))

    def _headers(self, key: str, params: Optional[BaseModel], method: str) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if method not in _QUERY_METHODS:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        if self.config.api_version:
            headers["Stripe-Version"] = self.config.api_version

        idempotency_key = getattr(params, "idempotency_key", None)
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        stripe_account = getattr(params, "stripe_account", None)
        if stripe_account:
            headers["Stripe-Account"] = stripe_account
        return headers

    def call_raw(
        self,
        method: str,
        path: str,
        key: Optional[str],
        form: FormValues,
        params: Optional[BaseModel],
        result_type: Type[ResultT],
    ) -> ResultT:
        method = method.upper()
        key = key or self.config.api_key
        if not key:
            raise AuthenticationError(
                "No API key provided. Set PAYMENTS_API_KEY or pass api_key in ClientConfig."
            )

        url = f"{self.api_base}{path}"
        request_kwargs: Dict[str, Any] = {"headers": self._headers(key, params, method)}
        if method in _QUERY_METHODS:
            if form:
                request_kwargs["params"] = form.to_pairs()
        else:
            request_kwargs["content"] = form.encode()

        logger.info("Requesting %s %s", method, path)
        logger.debug("Form values: %s", form)
        try:
            response = self._client.request(method, url, **request_kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out calling {method} {url}: {e}")
            raise TransportError(f"Request to {url} timed out after {self.config.timeout_seconds}s") from e
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        request_id = response.headers.get("Request-Id")
        logger.info(
            "Received response for %s %s: status=%s request_id=%s",
            method,
            path,
            response.status_code,
            request_id,
        )

        if response.status_code >= 400:
            raise self._error_from_response(response, request_id)

        return decode_resource(result_type, response.content)

    def _error_from_response(self, response: httpx.Response, request_id: Optional[str]) -> PaymentsClientError:
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {"error": {"message": response.text[:500] or None}}

        if response.status_code in (401, 403):
            error = body.get("error")
            if isinstance(error, dict):
                message = error.get("message")
            else:
                # some proxies send {"error": "<text>"}
                message = error if isinstance(error, str) else None
            logger.error(f"Authentication failed: {response.status_code} request_id={request_id}")
            return AuthenticationError(
                message or "The API rejected the provided key.",
                http_status=response.status_code,
                payload=body,
            )

        api_error = api_error_from_response(response.status_code, body, request_id=request_id)
        logger.error(f"HTTP error from payments API: {api_error}")
        return api_error

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
