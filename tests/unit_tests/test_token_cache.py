"""Tests for the process-wide SimplyBook token cache."""

from __future__ import annotations

import asyncio

import pytest

from courtify.config import Mode
from courtify.errors import AuthError
from courtify.services.simplybook.token_cache import TokenCache
from tests.mocks.auth import StubLogin


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestTokenCache:
    @pytest.mark.asyncio
    async def test_first_call_logs_in(self):
        login = StubLogin(token="abc")
        cache = TokenCache(login, Mode.REAL)
        assert await cache.get_token() == "abc"
        assert login.calls == 1

    @pytest.mark.asyncio
    async def test_token_reused_within_window(self):
        login = StubLogin()
        clock = FakeClock()
        cache = TokenCache(login, Mode.REAL, ttl_seconds=3000, clock=clock)

        first = await cache.get_token()
        clock.now += 2999
        second = await cache.get_token()

        assert first == second
        assert login.calls == 1
        assert cache.is_valid

    @pytest.mark.asyncio
    async def test_token_refreshed_after_expiry(self):
        login = StubLogin()
        clock = FakeClock()
        cache = TokenCache(login, Mode.REAL, ttl_seconds=3000, clock=clock)

        await cache.get_token()
        clock.now += 3000
        assert not cache.is_valid
        await cache.get_token()

        assert login.calls == 2

    @pytest.mark.asyncio
    async def test_default_ttl_is_fifty_minutes(self):
        login = StubLogin()
        clock = FakeClock()
        cache = TokenCache(login, Mode.REAL, clock=clock)

        await cache.get_token()
        clock.now += 50 * 60 - 1
        await cache.get_token()
        assert login.calls == 1

        clock.now += 1
        await cache.get_token()
        assert login.calls == 2

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self):
        login = StubLogin(error=AuthError("bad credentials"))
        cache = TokenCache(login, Mode.REAL)

        with pytest.raises(AuthError):
            await cache.get_token()

        login.error = None
        assert await cache.get_token() == login.token
        assert login.calls == 2

    @pytest.mark.asyncio
    async def test_simulated_mode_never_logs_in(self):
        login = StubLogin()
        cache = TokenCache(login, Mode.SIMULATED)
        assert await cache.get_token() is None
        assert login.calls == 0

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_login(self):
        calls = 0

        async def slow_login() -> str:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return "shared"

        cache = TokenCache(slow_login, Mode.REAL)
        tokens = await asyncio.gather(*(cache.get_token() for _ in range(5)))

        assert set(tokens) == {"shared"}
        assert calls == 1
