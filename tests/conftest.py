"""
Shared test fixtures.

Provides a FastAPI TestClient wired to:
  • a ProviderRegistry in simulated mode (no external HTTP)
  • a temporary booking ledger file
  • rate limiting disabled

The `real_client` fixture switches the registry to real mode backed by an
in-memory FakeProvider and a stub token login.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from courtify.config import Mode
from courtify.errors import AuthError
from courtify.main import app
from courtify.services.registry import ProviderRegistry
from courtify.services.simplybook.client import SimplyBookClient
from courtify.services.simplybook.token_cache import TokenCache
from tests.mocks.auth import StubLogin
from tests.mocks.provider import FakeProvider

# ── Helpers ────────────────────────────────────────────────────────────────


def _real_registry(tmp_path, provider: FakeProvider, login: StubLogin) -> ProviderRegistry:
    token_cache = TokenCache(login, Mode.REAL)
    client = SimplyBookClient("acme", "secret", Mode.REAL, token_cache=token_cache)
    reg = ProviderRegistry()
    reg.configure(
        Mode.REAL,
        bookings_file=tmp_path / "bookings.json",
        provider=provider,
        client=client,
    )
    return reg


def _install(monkeypatch, reg: ProviderRegistry) -> None:
    # Patch everywhere `registry` was imported
    for mod_path in (
        "courtify.services.registry",
        "courtify.main",
        "courtify.routers.health",
        "courtify.routers.services",
        "courtify.routers.availability",
        "courtify.routers.bookings",
    ):
        monkeypatch.setattr(f"{mod_path}.registry", reg)


# ── Fixtures ───────────────────────────────────────────────────────────────


@pytest.fixture()
def _test_env(monkeypatch, tmp_path):
    """
    Internal fixture: simulated-mode registry with a temp ledger, installed
    into every module that imported the singleton.
    """
    test_registry = ProviderRegistry()
    test_registry.configure(Mode.SIMULATED, bookings_file=tmp_path / "bookings.json")
    _install(monkeypatch, test_registry)

    # ── Disable rate limiting in tests ────────────────────────────────
    from courtify.rate_limit import limiter as _limiter
    monkeypatch.setattr(_limiter, "enabled", False)

    return test_registry


@pytest.fixture()
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture()
def stub_login() -> StubLogin:
    return StubLogin()


@pytest.fixture()
def client(_test_env: ProviderRegistry) -> TestClient:
    """TestClient against the simulated-mode registry (lifespan runs)."""
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc


@pytest.fixture()
def real_registry(_test_env, monkeypatch, tmp_path, fake_provider, stub_login) -> ProviderRegistry:
    reg = _real_registry(tmp_path, fake_provider, stub_login)
    _install(monkeypatch, reg)
    return reg


@pytest.fixture()
def real_client(real_registry: ProviderRegistry) -> TestClient:
    """TestClient against a real-mode registry backed by FakeProvider."""
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc


@pytest.fixture()
def failing_login_client(_test_env, monkeypatch, tmp_path, fake_provider) -> TestClient:
    """Real mode where every token request is rejected."""
    login = StubLogin(error=AuthError("getToken failed: {\"code\": -32001}"))
    _install(monkeypatch, _real_registry(tmp_path, fake_provider, login))
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
