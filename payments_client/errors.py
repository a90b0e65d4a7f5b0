"""
Errors raised by the payments client.

Every failure surfaces as a subclass of PaymentsClientError:
- TransportError: the request never produced a usable HTTP response
  (network failure, timeout) or credentials were rejected
- APIError: the API answered with a non-2xx status and a structured error body
- DecodeError: the response body is not the JSON shape we expected

Nothing here is retried or recovered; callers decide what to do.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PaymentsClientError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class TransportError(PaymentsClientError):
    """Network-level failure talking to the API."""


class AuthenticationError(TransportError):
    """Missing API key, or the API rejected the key (401/403)."""

    def __init__(
        self,
        message: str,
        *,
        http_status: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.http_status = http_status


class APIError(PaymentsClientError):
    """Non-2xx response carrying the API's error object."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int,
        type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        request_id: Optional[str] = None,
        doc_url: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.http_status = http_status
        self.type = type
        self.code = code
        self.param = param
        self.request_id = request_id
        self.doc_url = doc_url

    def __str__(self) -> str:
        parts = [f"{self.http_status}"]
        if self.type:
            parts.append(self.type)
        if self.code:
            parts.append(self.code)
        prefix = " ".join(parts)
        suffix = f" (request_id={self.request_id})" if self.request_id else ""
        return f"[{prefix}] {self.message}{suffix}"


class NotFoundError(APIError):
    """The requested resource does not exist."""


class DecodeError(PaymentsClientError):
    """Response body could not be decoded into the expected model."""


def api_error_from_response(
    http_status: int,
    body: Optional[Dict[str, Any]],
    *,
    request_id: Optional[str] = None,
) -> APIError:
    """
    Build the right APIError subclass from a decoded error response.

    The API wraps errors as {"error": {"type", "code", "message", "param", "doc_url"}}.
    A 404 status or a `resource_missing` code both mean the resource is absent.
    """
    body = body or {}
    error = body.get("error") if isinstance(body.get("error"), dict) else {}
    message = error.get("message") or f"API request failed with status {http_status}"
    code = error.get("code")

    error_cls = NotFoundError if http_status == 404 or code == "resource_missing" else APIError
    return error_cls(
        message,
        http_status=http_status,
        type=error.get("type"),
        code=code,
        param=error.get("param"),
        request_id=request_id,
        doc_url=error.get("doc_url"),
        payload=body,
    )
