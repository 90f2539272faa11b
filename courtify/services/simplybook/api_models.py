"""
Pydantic models that mirror the SimplyBook JSON-RPC shapes.

These are *internal* – the rest of the app never imports them directly.
The client translates them into courtify.models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from courtify.errors import RpcError
from courtify.models import Service, SlotMatrix, Unit
from courtify.services.simplybook.config import (
    DEFAULT_SERVICE_DURATION,
    JSONRPC_VERSION,
    METHOD_GET_START_TIME_MATRIX,
)


# ── Envelopes ─────────────────────────────────────────────────────────────

class RpcRequest(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: list[Any]
    id: str


class RpcResponse(BaseModel):
    jsonrpc: str | None = None
    id: str | int | None = None
    result: Any = None
    error: Any = None


# ── getEventList ──────────────────────────────────────────────────────────

class ProviderEvent(BaseModel):
    id: str | int
    name: str
    description: str | None = ""
    duration: int | None = None
    price: float | None = None
    unit_map: dict[str, Any] | list[Any] | None = None

    def to_service(self) -> Service:
        unit_ids: list[str] | None = None
        if isinstance(self.unit_map, dict):
            unit_ids = [str(k) for k in self.unit_map]
        elif isinstance(self.unit_map, list):
            # PHP encodes sequential maps (and empty ones) as JSON arrays.
            unit_ids = [str(i) for i in range(len(self.unit_map))]
        return Service(
            id=self.id,
            name=self.name,
            description=self.description or "",
            duration=self.duration or DEFAULT_SERVICE_DURATION,
            price=self.price,
            unit_ids=unit_ids,
        )


# ── getUnitList ───────────────────────────────────────────────────────────

class ProviderUnit(BaseModel):
    id: str | int
    name: str
    description: str | None = ""

    def to_unit(self) -> Unit:
        return Unit(id=self.id, name=self.name, description=self.description or "")


# ── Helpers ───────────────────────────────────────────────────────────────

def catalog_items(result: Any) -> list[dict[str, Any]]:
    """Catalog methods return either a list or an object keyed by id."""
    if result is None:
        return []
    if isinstance(result, dict):
        return list(result.values())
    return list(result)


def slot_matrix(result: Any) -> SlotMatrix:
    """Normalize a getStartTimeMatrix result; empty matrices come back as []."""
    if not isinstance(result, dict):
        return {}
    matrix: SlotMatrix = {}
    for day, times in result.items():
        if times is None:
            times = []
        if not isinstance(times, list):
            raise RpcError(
                METHOD_GET_START_TIME_MATRIX,
                {"message": f"Malformed start times for {day}", "value": times},
            )
        matrix[str(day)] = [str(t) for t in times]
    return matrix
