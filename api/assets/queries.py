# api/assets/queries.py
"""
SQLAlchemy query builders for assets.
"""
from sqlalchemy import select, func

from db_models.asset import Asset


def select_asset_by_id(asset_id: int):
    return select(Asset).where(Asset.id == asset_id)


def select_assets_page(page: int, page_size: int):
    """Select one page of assets, newest first."""
    return (
        select(Asset)
        .order_by(Asset.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )


def count_assets():
    return select(func.count(Asset.id))


def select_all_assets():
    return select(Asset).order_by(Asset.id.asc())


def select_bulk_children(bulk_id: str):
    """
    Select the members of a bulk group, excluding the parent row itself.
    """
    return (
        select(Asset)
        .where(
            Asset.bulk_id == bulk_id,
            Asset.is_bulk_parent == False,  # noqa: E712
        )
        .order_by(Asset.bulk_sequence.asc(), Asset.id.asc())
    )
