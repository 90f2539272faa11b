"""
Error kinds raised by the provider integration and the booking ledger.

Routers translate ``ValidationError`` into a 400 response; everything else
that escapes a handler becomes a 500 with the error message.
"""

from __future__ import annotations

import json
from typing import Any


class CourtifyError(Exception):
    """Base class for all application errors."""


class ValidationError(CourtifyError):
    """Caller input is missing or malformed."""


class ModeError(CourtifyError):
    """A real-mode provider operation was attempted in simulated mode."""


class AuthError(CourtifyError):
    """The provider refused to issue a session token."""


class TransportError(CourtifyError):
    """Network failure or timeout talking to the provider."""


class RpcError(CourtifyError):
    """The provider answered with a JSON-RPC error envelope."""

    def __init__(self, method: str, payload: Any) -> None:
        self.method = method
        self.payload = payload
        super().__init__(f"{method} failed: {json.dumps(payload, default=str)}")
