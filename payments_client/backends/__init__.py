"""
Backends (transports).

A backend performs one authenticated request and decodes the response:
- real_http.HTTPBackend talks to the live API over httpx
- mocks.MockBackend serves realistic fixtures from memory, no network

Important:
- Both implement the same Backend interface
- Resource clients never know which one they hold

Switching:
Choose the backend in ONE place (payments_client.client.PaymentsClient, or
get_backend() for a standalone resource client).
"""

from typing import Optional

import httpx

from payments_client.backends.base import Backend
from payments_client.backends.mocks import MockBackend, RecordedRequest
from payments_client.backends.real_http import HTTPBackend
from payments_client.config import ClientConfig


def get_backend(config: ClientConfig, http_client: Optional[httpx.Client] = None) -> Backend:
    """Default backend for `config`: the live HTTP API."""
    return HTTPBackend(config, http_client=http_client)


__all__ = ["Backend", "HTTPBackend", "MockBackend", "RecordedRequest", "get_backend"]
