# client/bulk_row.py
"""
Asset table rows, including expandable rows for bulk parents.

A bulk parent row starts collapsed. Expanding it loads the group's children
through the shared BulkChildrenCache; collapsing hides them again. Children
are only fetched while the row is expanded.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from api.assets.models import AssetRead
from api.locations.models import LocationRead
from core.formatting import format_idr, round_half_up
from core.status import normalize_status, status_label
from .bulk_cache import BulkChildrenCache

logger = logging.getLogger(__name__)


class RowState(str, Enum):
    COLLAPSED = "collapsed"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


def is_expandable(asset: AssetRead) -> bool:
    """Only bulk parents with more than one member can be expanded."""
    return bool(
        asset.is_bulk_parent
        and asset.bulk_id
        and (asset.bulk_total_count or 0) > 1
    )


def asset_depreciation_percentage(asset: AssetRead) -> int:
    """Accumulated depreciation as a share of the acquisition price."""
    if asset.acquisition_price <= 0:
        return 0
    return round_half_up(asset.accumulated_depreciation / asset.acquisition_price * 100)


def group_total(asset: AssetRead, unit_value: float) -> float:
    """A bulk parent stands for the whole group, so per-unit values scale by its size."""
    if is_expandable(asset):
        return unit_value * asset.bulk_total_count
    return unit_value


def location_display(asset: AssetRead, location: LocationRead | None = None) -> str:
    """
    "Name (Building Lt. Floor Room)" for a linked location, else the
    free-text location.
    """
    if asset.location_id is not None and location is not None:
        detail = location.building or ""
        if location.floor:
            detail += f" Lt. {location.floor}"
        if location.room:
            detail += f" {location.room}"
        return f"{location.name} ({detail})"
    return asset.location or ""


@dataclass(frozen=True)
class BulkChildView:
    id: int
    code: str
    status: str
    status_label: str
    sequence: int | None
    price_display: str
    residual_display: str

    @classmethod
    def from_asset(cls, asset: AssetRead) -> "BulkChildView":
        return cls(
            id=asset.id,
            code=asset.code,
            status=normalize_status(asset.status),
            status_label=status_label(asset.status),
            sequence=asset.bulk_sequence,
            price_display=format_idr(asset.acquisition_price),
            residual_display=format_idr(asset.residual_value),
        )


class BulkRow:
    """Expand/collapse state of one asset row. Not shared between rows."""

    def __init__(self, asset: AssetRead, cache: BulkChildrenCache):
        self.asset = asset
        self._cache = cache
        self._expanded = False
        self.state = RowState.COLLAPSED
        self.children: list[BulkChildView] = []
        self.error: Exception | None = None

    @property
    def expanded(self) -> bool:
        return self._expanded

    @property
    def is_expandable(self) -> bool:
        return is_expandable(self.asset)

    @property
    def status_label(self) -> str:
        return status_label(self.asset.status)

    @property
    def depreciation_percentage(self) -> int:
        return asset_depreciation_percentage(self.asset)

    @property
    def total_price(self) -> float:
        return group_total(self.asset, self.asset.acquisition_price)

    @property
    def total_residual(self) -> float:
        return group_total(self.asset, self.asset.residual_value)

    @property
    def total_price_display(self) -> str:
        return format_idr(self.total_price)

    @property
    def total_residual_display(self) -> str:
        return format_idr(self.total_residual)

    def _show(self, children: list[AssetRead]) -> None:
        self.children = [BulkChildView.from_asset(child) for child in children]
        self.error = None
        self.state = RowState.LOADED

    async def expand(self) -> None:
        if not self.is_expandable:
            return
        self._expanded = True
        bulk_id = self.asset.bulk_id

        cached = self._cache.peek(bulk_id)
        if cached is not None:
            self._show(cached)
            return

        self.state = RowState.LOADING
        self.error = None
        try:
            children = await self._cache.get(bulk_id)
        except Exception as exc:
            logger.warning("Loading bulk group %s failed: %s", bulk_id, exc)
            if self._expanded:
                self.state = RowState.ERROR
                self.error = exc
            return

        # Collapsed while loading: the result stays in the cache only
        if self._expanded:
            self._show(children)

    def collapse(self) -> None:
        self._expanded = False
        self.state = RowState.COLLAPSED

    async def toggle(self) -> None:
        if self._expanded:
            self.collapse()
        else:
            await self.expand()
