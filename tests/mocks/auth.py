"""Stub SimplyBook login for token-cache and registry tests."""

from __future__ import annotations


class StubLogin:
    """Login callable that counts calls and can be told to fail."""

    def __init__(self, token: str = "tok-123", error: Exception | None = None) -> None:
        self.token = token
        self.error = error
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.token
