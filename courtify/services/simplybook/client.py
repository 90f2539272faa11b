"""
Low-level JSON-RPC client for the SimplyBook user API.

Handles envelope construction, token headers, and JSON ↔ Pydantic parsing.
A single instance is shared across the app lifetime.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any

import httpx
import pydantic

from courtify.config import (
    SIMPLYBOOK_API_URL,
    SIMPLYBOOK_AUTH_TIMEOUT,
    SIMPLYBOOK_LOGIN_URL,
    SIMPLYBOOK_RPC_TIMEOUT,
    Mode,
)
from courtify.errors import AuthError, ModeError, RpcError, TransportError
from courtify.models import ProviderId, Service, SlotMatrix, Unit
from courtify.services.simplybook.api_models import (
    ProviderEvent,
    ProviderUnit,
    RpcRequest,
    RpcResponse,
    catalog_items,
    slot_matrix,
)
from courtify.services.simplybook.config import (
    DEFAULT_HEADERS,
    DEFAULT_SLOT_COUNT,
    METHOD_GET_EVENT_LIST,
    METHOD_GET_START_TIME_MATRIX,
    METHOD_GET_TOKEN,
    METHOD_GET_UNIT_LIST,
)
from courtify.services.simplybook.token_cache import TokenCache

logger = logging.getLogger(__name__)


def _request_id() -> str:
    return uuid.uuid4().hex


class SimplyBookClient:
    """Async JSON-RPC client for user-api.simplybook.me."""

    def __init__(
        self,
        company_login: str,
        api_key: str,
        mode: Mode,
        *,
        api_url: str = SIMPLYBOOK_API_URL,
        login_url: str = SIMPLYBOOK_LOGIN_URL,
        auth_timeout: float = SIMPLYBOOK_AUTH_TIMEOUT,
        rpc_timeout: float = SIMPLYBOOK_RPC_TIMEOUT,
        token_cache: TokenCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._company_login = company_login
        self._api_key = api_key
        self._mode = mode
        self._api_url = api_url
        self._login_url = login_url
        self._auth_timeout = auth_timeout
        self._rpc_timeout = rpc_timeout
        self._client = http_client or httpx.AsyncClient(headers=DEFAULT_HEADERS)
        self.token_cache = token_cache or TokenCache(self.login, mode)

    @property
    def mode(self) -> Mode:
        return self._mode

    async def close(self) -> None:
        await self._client.aclose()

    # ── Transport ─────────────────────────────────────────────────────

    async def _post(
        self,
        url: str,
        payload: RpcRequest,
        timeout: float,
        headers: dict[str, str] | None = None,
    ) -> RpcResponse:
        try:
            resp = await self._client.post(
                url,
                json=payload.model_dump(),
                headers=headers,
                timeout=timeout,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"{payload.method} timed out after {timeout:g}s") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{payload.method} request failed: {exc}") from exc

        try:
            envelope = RpcResponse.model_validate(resp.json())
        except (ValueError, pydantic.ValidationError):
            envelope = None

        # Error envelopes win over the HTTP status so callers see the payload.
        if envelope is not None and envelope.error:
            return envelope
        if resp.is_error:
            raise TransportError(f"{payload.method} returned HTTP {resp.status_code}")
        if envelope is None:
            raise TransportError(f"{payload.method} returned a non JSON-RPC body")
        return envelope

    # ── Authentication ────────────────────────────────────────────────

    async def login(self) -> str:
        """Exchange company login + API key for a session token."""
        if self._mode is Mode.SIMULATED:
            raise ModeError("simulated mode – SimplyBook login is disabled")

        payload = RpcRequest(
            method=METHOD_GET_TOKEN,
            params=[self._company_login, self._api_key],
            id=_request_id(),
        )
        try:
            envelope = await self._post(self._login_url, payload, self._auth_timeout)
        except TransportError as exc:
            raise AuthError(str(exc)) from exc

        if envelope.error:
            raise AuthError(str(RpcError(METHOD_GET_TOKEN, envelope.error)))
        if not envelope.result:
            raise AuthError("getToken returned an empty token")
        return str(envelope.result)

    # ── Generic call ──────────────────────────────────────────────────

    async def call(self, method: str, params: list[Any] | None = None) -> Any:
        """Invoke *method* with the cached token and unwrap its result."""
        if self._mode is Mode.SIMULATED:
            raise ModeError(f"simulated mode – SimplyBook call {method} is disabled")

        token = await self.token_cache.get_token()
        payload = RpcRequest(method=method, params=list(params or []), id=_request_id())
        headers = {
            "X-Company-Login": self._company_login,
            "X-Token": token or "",
        }
        logger.debug("SimplyBook RPC %s params=%s", method, payload.params)
        envelope = await self._post(self._api_url, payload, self._rpc_timeout, headers)
        if envelope.error:
            raise RpcError(method, envelope.error)
        return envelope.result

    # ── Typed helpers ─────────────────────────────────────────────────

    async def get_event_list(self) -> list[Service]:
        result = await self.call(METHOD_GET_EVENT_LIST, [])
        return [ProviderEvent.model_validate(item).to_service() for item in catalog_items(result)]

    async def get_unit_list(self) -> list[Unit]:
        result = await self.call(METHOD_GET_UNIT_LIST, [])
        return [ProviderUnit.model_validate(item).to_unit() for item in catalog_items(result)]

    async def get_start_time_matrix(
        self,
        date_from: str | date,
        date_to: str | date,
        service_id: ProviderId,
        unit_id: ProviderId,
        count: int = DEFAULT_SLOT_COUNT,
    ) -> SlotMatrix:
        result = await self.call(
            METHOD_GET_START_TIME_MATRIX,
            [str(date_from), str(date_to), service_id, unit_id, count],
        )
        return slot_matrix(result)
