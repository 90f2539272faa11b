"""
Provider registry – wires the SimplyBook integration together.

Owns the mode, the shared HTTP client, the token cache, the catalog, the
availability aggregator and the booking ledger. Built once at application
startup; routers look components up through the module-level singleton.
"""

from __future__ import annotations

import logging
from pathlib import Path

from courtify import config
from courtify.config import Mode
from courtify.services.availability import AvailabilityAggregator
from courtify.services.catalog import ServiceCatalog
from courtify.services.ledger import BookingLedger
from courtify.services.provider import SchedulingProvider
from courtify.services.simplybook.client import SimplyBookClient
from courtify.services.simplybook.token_cache import TokenCache

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Holds every component a request handler needs.

    ``configure()`` builds them from explicit arguments so tests can wire a
    fake provider or a temporary ledger without touching the environment.
    """

    def __init__(self) -> None:
        self.mode: Mode = Mode.SIMULATED
        self.client: SimplyBookClient | None = None
        self.catalog: ServiceCatalog | None = None
        self.aggregator: AvailabilityAggregator | None = None
        self.ledger: BookingLedger | None = None

    def configure(
        self,
        mode: Mode,
        *,
        company_login: str = "",
        api_key: str = "",
        bookings_file: str | Path = config.BOOKINGS_FILE,
        provider: SchedulingProvider | None = None,
        client: SimplyBookClient | None = None,
    ) -> None:
        """Build all components for *mode*.

        *provider* overrides the SimplyBook client as the data source for
        the catalog and the aggregator (used by tests).
        """
        self.mode = mode
        self.client = client or SimplyBookClient(company_login, api_key, mode)
        source = provider or self.client
        self.catalog = ServiceCatalog(source, mode)
        self.aggregator = AvailabilityAggregator(source, mode)
        self.ledger = BookingLedger(bookings_file)

    def configure_from_env(self) -> None:
        mode = config.configured_mode()
        if not config.SIMPLYBOOK_COMPANY_LOGIN or not config.SIMPLYBOOK_API_KEY:
            logger.warning(
                "SIMPLYBOOK_COMPANY_LOGIN or SIMPLYBOOK_API_KEY not set – running in simulated mode",
            )
        self.configure(
            mode,
            company_login=config.SIMPLYBOOK_COMPANY_LOGIN,
            api_key=config.SIMPLYBOOK_API_KEY,
            bookings_file=config.BOOKINGS_FILE,
        )

    @property
    def token_cache(self) -> TokenCache:
        return self._require(self.client).token_cache

    async def start(self) -> None:
        """Prepare on-disk state; called from the app lifespan."""
        self._require(self.ledger).ensure_file()
        logger.info("Courtify started in %s mode", self.mode.value)

    async def stop(self) -> None:
        """Close the shared HTTP client."""
        if self.client is not None:
            await self.client.close()

    @staticmethod
    def _require(component):
        if component is None:
            raise RuntimeError("ProviderRegistry not configured – call configure() first")
        return component

    def get_catalog(self) -> ServiceCatalog:
        return self._require(self.catalog)

    def get_aggregator(self) -> AvailabilityAggregator:
        return self._require(self.aggregator)

    def get_ledger(self) -> BookingLedger:
        return self._require(self.ledger)


# ── Singleton instance ────────────────────────────────────────────────────
registry = ProviderRegistry()
