"""Canned data served in simulated mode (no SimplyBook credentials)."""

from __future__ import annotations

from courtify.models import (
    Service,
    ServiceAvailability,
    ServiceSummary,
    Unit,
    UnitAvailability,
)

DEFAULT_PREFERRED_TIME = "18:00"
DEFAULT_SPORT = "Badminton"
DEFAULT_LOCATION = "Makati Sports Center"


def get_mock_services() -> list[Service]:
    """The service catalog shown when no provider is configured."""
    return [
        Service(
            id="svc-1",
            name="Badminton - Single Court",
            description="Standard indoor badminton court",
            duration=60,
            price=250,
        ),
        Service(
            id="svc-2",
            name="Tennis Court (Outdoor)",
            description="Outdoor tennis court",
            duration=60,
            price=400,
        ),
        Service(
            id="svc-3",
            name="Basketball Pickup (Half-court)",
            description="Indoor half-court booking",
            duration=60,
            price=600,
        ),
    ]


def get_mock_availability(
    date_from: str,
    preferred_location: str = "",
    sport: str = "",
    preferred_time: str = "",
) -> list[ServiceAvailability]:
    """
    One service on two courts, each free exactly at the preferred time
    on *date_from*. Gives the frontend a stable, non-empty result.
    """
    slot = preferred_time or DEFAULT_PREFERRED_TIME
    start_times = {date_from: [slot]}
    return [
        ServiceAvailability(
            service=ServiceSummary(id="svc-1", name=f"{sport or DEFAULT_SPORT} (mock)", duration=60),
            units=[
                UnitAvailability(
                    unit=Unit(
                        id="u-1",
                        name=f"{preferred_location or DEFAULT_LOCATION} (Indoor #1)",
                        description="Mock court",
                    ),
                    startTimes=dict(start_times),
                ),
                UnitAvailability(
                    unit=Unit(
                        id="u-2",
                        name="Riverside Arena (Indoor #2)",
                        description="Mock court 2",
                    ),
                    startTimes=dict(start_times),
                ),
            ],
        )
    ]
