"""
Availability aggregation.

Given a date range and the caller's preferences, pick candidate services
and units from the provider catalog, fetch a start-time matrix for every
(service, unit) pair concurrently, and trim each matrix to the preferred
time window. In simulated mode the result is canned but has the same shape.

The unit filters are plain keyword matches on the free-text name and
description. Downstream consumers rely on this exact behaviour, so keep the
keywords as they are.
"""

from __future__ import annotations

import asyncio
import logging
import re

from courtify.config import MAX_CONCURRENT_FETCHES, Mode
from courtify.errors import CourtifyError, ValidationError
from courtify.mock_data import get_mock_availability
from courtify.models import (
    Service,
    ServiceAvailability,
    ServiceSummary,
    SlotMatrix,
    Unit,
    UnitAvailability,
)
from courtify.services.provider import SchedulingProvider
from courtify.services.simplybook.config import DEFAULT_SLOT_COUNT

logger = logging.getLogger(__name__)

INDOOR_KEYWORDS = ("indoor",)
OUTDOOR_KEYWORDS = ("outdoor", "park", "field")

# Slots within this many minutes of the preferred time (inclusive) are kept.
PREFERRED_TIME_WINDOW_MINUTES = 30

_PREFERRED_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


# ── Filters ────────────────────────────────────────────────────────────────


def _search_text(name: str, description: str | None) -> str:
    return f"{name} {description or ''}".lower()


def matches_sport(service: Service, sport: str) -> bool:
    if not sport:
        return True
    return sport.lower() in _search_text(service.name, service.description)


def matches_location(unit: Unit, location: str) -> bool:
    if not location:
        return True
    return location.lower() in _search_text(unit.name, unit.description)


def matches_indoor_outdoor(unit: Unit, indoor_outdoor: str) -> bool:
    text = _search_text(unit.name, unit.description)
    if indoor_outdoor == "indoor":
        return any(k in text for k in INDOOR_KEYWORDS)
    if indoor_outdoor == "outdoor":
        return any(k in text for k in OUTDOOR_KEYWORDS)
    # "any" and unrecognised values let everything through
    return True


def parse_preferred_time(value: str) -> int:
    """Parse "HH:MM" into minutes since midnight."""
    match = _PREFERRED_TIME_RE.match(value.strip())
    if match is None:
        raise ValidationError(f"preferredTime must be HH:MM, got {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValidationError(f"preferredTime out of range: {value!r}")
    return hours * 60 + minutes


def _slot_minutes(slot: str) -> int | None:
    # Provider times look like "HH:MM:SS"; seconds are ignored.
    parts = slot.split(":")
    try:
        hours = int(parts[0])
        minutes = int(parts[1]) if len(parts) > 1 else 0
    except ValueError:
        return None
    return hours * 60 + minutes


def filter_by_preferred_time(
    matrix: SlotMatrix,
    preferred_minutes: int,
    window: int = PREFERRED_TIME_WINDOW_MINUTES,
) -> SlotMatrix:
    """Keep times within *window* minutes of the preference; drop emptied dates."""
    filtered: SlotMatrix = {}
    for day, times in matrix.items():
        kept = []
        for t in times:
            minutes = _slot_minutes(t)
            if minutes is not None and abs(minutes - preferred_minutes) <= window:
                kept.append(t)
        if kept:
            filtered[day] = kept
    return filtered


# ── Aggregator ─────────────────────────────────────────────────────────────


class AvailabilityAggregator:
    def __init__(
        self,
        provider: SchedulingProvider,
        mode: Mode,
        *,
        max_concurrency: int = MAX_CONCURRENT_FETCHES,
    ) -> None:
        self._provider = provider
        self._mode = mode
        self._max_concurrency = max(1, max_concurrency)

    async def check_availability(
        self,
        date_from: str | None,
        date_to: str | None,
        preferred_location: str = "",
        indoor_outdoor: str = "any",
        sport: str = "",
        preferred_time: str = "",
    ) -> list[ServiceAvailability]:
        if not date_from or not date_to:
            raise ValidationError("dateFrom and dateTo required")

        preferred_location = preferred_location or ""
        indoor_outdoor = indoor_outdoor or "any"
        sport = sport or ""
        preferred_time = preferred_time or ""

        if self._mode is Mode.SIMULATED:
            return get_mock_availability(
                date_from,
                preferred_location=preferred_location,
                sport=sport,
                preferred_time=preferred_time,
            )

        preferred_minutes = parse_preferred_time(preferred_time) if preferred_time else None

        services = await self._provider.get_event_list()
        units = await self._provider.get_unit_list()

        candidate_services = [s for s in services if matches_sport(s, sport)]
        matching_units = [
            u
            for u in units
            if matches_location(u, preferred_location) and matches_indoor_outdoor(u, indoor_outdoor)
        ]
        logger.debug(
            "Availability %s..%s: %d/%d services, %d/%d units",
            date_from,
            date_to,
            len(candidate_services),
            len(services),
            len(matching_units),
            len(units),
        )

        semaphore = asyncio.Semaphore(self._max_concurrency)
        return list(
            await asyncio.gather(
                *(
                    self._service_availability(
                        service, matching_units, date_from, date_to, preferred_minutes, semaphore,
                    )
                    for service in candidate_services
                )
            )
        )

    async def _service_availability(
        self,
        service: Service,
        matching_units: list[Unit],
        date_from: str,
        date_to: str,
        preferred_minutes: int | None,
        semaphore: asyncio.Semaphore,
    ) -> ServiceAvailability:
        if service.unit_ids is None:
            allowed = matching_units
        else:
            eligible = set(service.unit_ids)
            allowed = [u for u in matching_units if str(u.id) in eligible]

        per_unit = await asyncio.gather(
            *(
                self._unit_availability(service, unit, date_from, date_to, preferred_minutes, semaphore)
                for unit in allowed
            )
        )
        return ServiceAvailability(
            service=ServiceSummary(id=service.id, name=service.name, duration=service.duration),
            units=list(per_unit),
        )

    async def _unit_availability(
        self,
        service: Service,
        unit: Unit,
        date_from: str,
        date_to: str,
        preferred_minutes: int | None,
        semaphore: asyncio.Semaphore,
    ) -> UnitAvailability:
        try:
            async with semaphore:
                matrix = await self._provider.get_start_time_matrix(
                    date_from, date_to, service.id, unit.id, DEFAULT_SLOT_COUNT,
                )
            if preferred_minutes is not None:
                matrix = filter_by_preferred_time(matrix, preferred_minutes)
        except CourtifyError as exc:
            logger.warning(
                "Start time matrix failed for service=%s unit=%s: %s",
                service.id,
                unit.id,
                exc,
            )
            return UnitAvailability(unit=unit, error=str(exc))
        except Exception as exc:
            logger.exception(
                "Unexpected error reading start times for service=%s unit=%s",
                service.id,
                unit.id,
            )
            return UnitAvailability(unit=unit, error=str(exc) or type(exc).__name__)

        return UnitAvailability(unit=unit, startTimes=matrix)
