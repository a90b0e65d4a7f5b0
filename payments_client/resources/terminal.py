"""Terminal connection tokens: /v1/terminal/connection_tokens"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.terminal import TerminalConnectionToken, TerminalConnectionTokenParams
from payments_client.resources.base import ResourceClient


class TerminalConnectionTokenClient(ResourceClient):
    def new(self, params: Optional[TerminalConnectionTokenParams] = None) -> TerminalConnectionToken:
        """Issue a connection token for a card reader."""
        return self.backend.call(
            "POST", "/v1/terminal/connection_tokens", self.key, params, TerminalConnectionToken
        )
