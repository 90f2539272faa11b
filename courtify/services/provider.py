"""
Abstract interface for the scheduling provider.

The availability aggregator and the service catalog only need these three
catalog/slot operations, so tests can swap in an in-memory provider instead
of the real SimplyBook client.
"""

from __future__ import annotations

from typing import Protocol

from courtify.models import ProviderId, Service, SlotMatrix, Unit


class SchedulingProvider(Protocol):
    """Protocol that the SimplyBook client (and test fakes) satisfy."""

    async def get_event_list(self) -> list[Service]:
        """Return the full service catalog."""
        ...

    async def get_unit_list(self) -> list[Unit]:
        """Return the full unit (court) catalog."""
        ...

    async def get_start_time_matrix(
        self,
        date_from: str,
        date_to: str,
        service_id: ProviderId,
        unit_id: ProviderId,
        count: int = 1,
    ) -> SlotMatrix:
        """
        Return bookable start times per date for one service on one unit.
        Raises RpcError / TransportError / AuthError on failure.
        """
        ...
