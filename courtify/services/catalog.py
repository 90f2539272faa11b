"""Service catalog – SimplyBook events, or the canned list in simulated mode."""

from __future__ import annotations

import logging

from courtify.config import Mode
from courtify.mock_data import get_mock_services
from courtify.models import Service
from courtify.services.provider import SchedulingProvider

logger = logging.getLogger(__name__)


class ServiceCatalog:
    def __init__(self, provider: SchedulingProvider, mode: Mode) -> None:
        self._provider = provider
        self._mode = mode

    async def list_services(self) -> list[Service]:
        if self._mode is Mode.SIMULATED:
            return get_mock_services()
        services = await self._provider.get_event_list()
        logger.debug("Fetched %d services from SimplyBook", len(services))
        return services
