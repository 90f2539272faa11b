"""Pydantic models for the Courtify booking API."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_serializer

# Provider ids arrive as strings ("3") but older accounts send integers.
ProviderId = str | int

# date string -> ordered start times on that date
SlotMatrix = dict[str, list[str]]


# ── Catalog ────────────────────────────────────────────────────────────────


class Service(BaseModel):
    """A bookable activity (SimplyBook "event")."""
    id: ProviderId
    name: str
    description: str = ""
    duration: int = 60
    price: float | None = None
    # None means every matched unit may provide this service.
    unit_ids: list[str] | None = Field(default=None, exclude=True)


class Unit(BaseModel):
    """A concrete bookable resource, e.g. one court."""
    id: ProviderId
    name: str
    description: str = ""


class ServiceSummary(BaseModel):
    id: ProviderId
    name: str
    duration: int = 60


# ── Availability ───────────────────────────────────────────────────────────


class UnitAvailability(BaseModel):
    """Slot matrix for one unit, or the error that prevented fetching it."""
    unit: Unit
    startTimes: SlotMatrix | None = None
    error: str | None = None

    @model_serializer(mode="wrap")
    def _drop_absent_branch(self, handler) -> dict[str, Any]:
        data = handler(self)
        if self.error is None:
            data.pop("error", None)
        else:
            data.pop("startTimes", None)
        return data


class ServiceAvailability(BaseModel):
    service: ServiceSummary
    units: list[UnitAvailability] = Field(default_factory=list)


class AvailabilityRequest(BaseModel):
    preferredLocation: str | None = ""
    indoorOutdoor: str | None = "any"
    sport: str | None = ""
    dateFrom: str | None = None
    dateTo: str | None = None
    preferredTime: str | None = ""


class AvailabilityResponse(BaseModel):
    success: Literal[True] = True
    dateFrom: str
    dateTo: str
    preferredTime: str = ""
    results: list[ServiceAvailability]


# ── Bookings ───────────────────────────────────────────────────────────────


class BookingRequest(BaseModel):
    """Incoming booking payload; required fields are enforced by the ledger."""
    serviceId: ProviderId | None = None
    serviceName: str | None = None
    unitId: ProviderId | None = None
    unitName: str | None = None
    date: str | None = None
    time: str | None = None
    customerName: str | None = None
    contact: str | None = None
    price: float | str | None = None


class BookingRecord(BaseModel):
    id: str
    serviceId: ProviderId
    serviceName: str | None = None
    unitId: ProviderId
    unitName: str | None = None
    date: str
    time: str
    customerName: str
    contact: str = ""
    price: float | str | None = None
    status: str
    createdAt: str


class BookingResponse(BaseModel):
    success: Literal[True] = True
    booking: BookingRecord


class BookingListResponse(BaseModel):
    success: Literal[True] = True
    bookings: list[BookingRecord]


# ── Misc responses ─────────────────────────────────────────────────────────


class ServicesResponse(BaseModel):
    success: Literal[True] = True
    services: list[Service]


class PingResponse(BaseModel):
    ok: bool = True
    ts: str


class HealthResponse(BaseModel):
    ok: bool = True
    simplybook_token: bool
    mock: bool | None = None
    token_error: str | None = None


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
