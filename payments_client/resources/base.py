from __future__ import annotations

from typing import Optional, Type, TypeVar
from urllib.parse import quote

from payments_client.backends import Backend, get_backend
from payments_client.config import ClientConfig

ClientT = TypeVar("ClientT", bound="ResourceClient")


def format_url_path(template: str, *identifiers: str) -> str:
    """Substitute URL-escaped identifiers into a `%s` path template."""
    return template % tuple(quote(str(identifier), safe="") for identifier in identifiers)


class ResourceClient:
    """Backend plus API key; subclasses add the operations for one resource."""

    def __init__(self, backend: Backend, key: Optional[str] = None) -> None:
        self.backend = backend
        self.key = key

    @classmethod
    def from_config(cls: Type[ClientT], config: ClientConfig, backend: Optional[Backend] = None) -> ClientT:
        return cls(backend or get_backend(config), config.api_key)
