# client/dashboard_loader.py
"""
Fetches assets, categories and locations concurrently and feeds them to the
dashboard aggregator.

Stats are produced only when all three fetches succeed; a failure in any of
them yields DashboardLoadError and no partial result.
"""
import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from config import settings
from api.assets.models import AssetRead
from api.categories.models import CategoryRead
from api.dashboard.aggregator import compute_dashboard_stats
from api.dashboard.models import DashboardStats
from api.locations.models import LocationRead
from .api_client import InventoryClient

logger = logging.getLogger(__name__)

SOURCES = ("assets", "categories", "locations")


class DashboardLoadError(Exception):
    """One of the dashboard inputs could not be fetched."""

    def __init__(self, source: str, cause: Exception):
        super().__init__(f"Failed to load {source}: {cause}")
        self.source = source
        self.cause = cause


async def fetch_snapshots(
    client: InventoryClient,
    page_size: int | None = None,
) -> tuple[list[AssetRead], list[CategoryRead], list[LocationRead]]:
    """Run the three listing requests concurrently and wait for all of them."""
    page_size = page_size or settings.DASHBOARD_PAGE_SIZE
    results = await asyncio.gather(
        client.list_assets(1, page_size),
        client.list_categories(1, page_size),
        client.list_locations(1, page_size),
        return_exceptions=True,
    )

    for source, result in zip(SOURCES, results):
        if isinstance(result, Exception):
            logger.error("Error fetching %s: %s", source, result)
            raise DashboardLoadError(source, result) from result
        if isinstance(result, BaseException):
            raise result

    assets, categories, locations = results
    return assets.data, categories.data, locations.data


async def load_dashboard(
    client: InventoryClient,
    reference: datetime | None = None,
    page_size: int | None = None,
) -> DashboardStats:
    assets, categories, locations = await fetch_snapshots(client, page_size)
    return compute_dashboard_stats(assets, categories, locations, reference=reference)


class DashboardState:
    """
    Latest snapshots of the three lists plus the stats derived from them.

    Stats are recomputed from scratch whenever any list is replaced by a
    different object, and are None while a list is missing or the last
    refresh failed.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self.assets: list[AssetRead] | None = None
        self.categories: list[CategoryRead] | None = None
        self.locations: list[LocationRead] | None = None
        self.error: DashboardLoadError | None = None
        self._computed_from: tuple | None = None
        self._stats: DashboardStats | None = None

    def update(
        self,
        assets: list[AssetRead] | None = None,
        categories: list[CategoryRead] | None = None,
        locations: list[LocationRead] | None = None,
    ) -> None:
        if assets is not None:
            self.assets = assets
        if categories is not None:
            self.categories = categories
        if locations is not None:
            self.locations = locations

    @property
    def is_ready(self) -> bool:
        return (
            self.error is None
            and self.assets is not None
            and self.categories is not None
            and self.locations is not None
        )

    @property
    def stats(self) -> DashboardStats | None:
        if not self.is_ready:
            return None

        inputs = (self.assets, self.categories, self.locations)
        if self._computed_from is None or any(
            new is not old for new, old in zip(inputs, self._computed_from)
        ):
            self._stats = compute_dashboard_stats(*inputs, reference=self._clock())
            self._computed_from = inputs
        return self._stats

    async def refresh(self, client: InventoryClient, page_size: int | None = None) -> DashboardStats:
        """Refetch all three lists. Calling again after a failure retries."""
        try:
            assets, categories, locations = await fetch_snapshots(client, page_size)
        except DashboardLoadError as exc:
            self.error = exc
            raise
        self.error = None
        self.update(assets, categories, locations)
        return self.stats
