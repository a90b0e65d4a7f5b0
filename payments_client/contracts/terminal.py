"""Terminal contracts."""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.base import APIResource, Params


class TerminalConnectionTokenParams(Params):
    location: Optional[str] = None


class TerminalConnectionToken(APIResource):
    """Short-lived secret a card reader SDK uses to connect to the account."""

    location: Optional[str] = None
    secret: Optional[str] = None
