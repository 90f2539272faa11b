"""
Process-wide cache for the SimplyBook session token.

One token is shared by every request. It is refreshed lazily: the first
call after expiry logs in again, failures are never cached.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from courtify.config import TOKEN_TTL_SECONDS, Mode

logger = logging.getLogger(__name__)


class TokenCache:
    def __init__(
        self,
        login: Callable[[], Awaitable[str]],
        mode: Mode,
        *,
        ttl_seconds: float = TOKEN_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._login = login
        self._mode = mode
        self._ttl = ttl_seconds
        self._clock = clock
        self._token: str | None = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    @property
    def is_valid(self) -> bool:
        return self._token is not None and self._clock() < self._expires_at

    async def get_token(self) -> str | None:
        """Return the cached token, logging in first if it is missing or stale.

        Returns None in simulated mode without touching the network.
        Raises AuthError when the provider refuses to issue a token.
        """
        if self._mode is Mode.SIMULATED:
            return None

        async with self._lock:
            now = self._clock()
            if self._token is not None and now < self._expires_at:
                return self._token

            logger.info("Requesting new SimplyBook session token")
            try:
                token = await self._login()
            except Exception:
                logger.warning("SimplyBook login failed", exc_info=True)
                raise

            self._token = token
            self._expires_at = now + self._ttl
            logger.info("SimplyBook token cached for %ds", int(self._ttl))
            return token
