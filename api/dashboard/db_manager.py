# api/dashboard/db_manager.py
"""
Loads the three dashboard inputs from the database and runs the aggregator.
"""
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from api.assets import db_manager as asset_manager
from api.assets.models import AssetRead
from api.categories import db_manager as category_manager
from api.categories.models import CategoryRead
from api.locations import db_manager as location_manager
from api.locations.models import LocationRead
from .aggregator import compute_dashboard_stats
from .models import DashboardStats


async def load_snapshots(
    db: AsyncSession,
) -> tuple[list[AssetRead], list[CategoryRead], list[LocationRead]]:
    """Read full, immutable copies of assets, categories and locations."""
    assets = await asset_manager.list_all_assets(db)
    categories = await category_manager.list_all_categories(db)
    locations = await location_manager.list_all_locations(db)
    return (
        [AssetRead.model_validate(a) for a in assets],
        [CategoryRead.model_validate(c) for c in categories],
        [LocationRead.model_validate(loc) for loc in locations],
    )


async def get_dashboard_stats(db: AsyncSession, reference: datetime | None = None) -> DashboardStats:
    assets, categories, locations = await load_snapshots(db)
    return compute_dashboard_stats(assets, categories, locations, reference=reference)
