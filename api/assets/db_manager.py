# api/assets/db_manager.py
"""
Read access to assets and bulk groups.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from db_models.asset import Asset
from . import queries


class AssetNotFoundError(Exception):
    """Raised when asset doesn't exist."""
    pass


async def get_asset_by_id(db: AsyncSession, asset_id: int) -> Asset:
    """Get an asset by ID. Raises AssetNotFoundError if not found."""
    result = await db.execute(queries.select_asset_by_id(asset_id))
    asset = result.scalar_one_or_none()
    if asset is None:
        raise AssetNotFoundError(f"Asset {asset_id} not found")
    return asset


async def list_assets(db: AsyncSession, page: int, page_size: int) -> tuple[list[Asset], int]:
    """Return one page of assets and the total count."""
    result = await db.execute(queries.count_assets())
    total = result.scalar() or 0

    result = await db.execute(queries.select_assets_page(page, page_size))
    return list(result.scalars().all()), total


async def list_all_assets(db: AsyncSession) -> list[Asset]:
    result = await db.execute(queries.select_all_assets())
    return list(result.scalars().all())


async def list_bulk_children(db: AsyncSession, bulk_id: str) -> list[Asset]:
    """Children sharing bulk_id; empty when the group is unknown."""
    result = await db.execute(queries.select_bulk_children(bulk_id))
    return list(result.scalars().all())
