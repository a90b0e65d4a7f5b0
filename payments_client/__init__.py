"""
payments-client

Typed client for the payments REST API:
- per-resource clients (get / new / list / delete)
- typed request params and response models (pydantic)
- lazy pagination iterators
- pluggable backends: live HTTP (httpx) or in-memory mock

Key rule:
- There is no global API key or backend. Build a ClientConfig and pass it
  (or a Backend) explicitly.
"""

__version__ = "0.1.0"

from .backends import Backend, HTTPBackend, MockBackend, get_backend
from .client import PaymentsClient
from .config import ClientConfig, config_from_env, load_client_config
from .errors import (
    APIError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    PaymentsClientError,
    TransportError,
)
from .iterator import IteratorState, ListIterator

__all__ = [
    "__version__",
    # core
    "PaymentsClient", "ClientConfig", "config_from_env", "load_client_config",
    # backends
    "Backend", "HTTPBackend", "MockBackend", "get_backend",
    # iteration
    "IteratorState", "ListIterator",
    # errors
    "APIError", "AuthenticationError", "DecodeError", "NotFoundError",
    "PaymentsClientError", "TransportError",
]
