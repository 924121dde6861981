# api/categories/queries.py
"""
SQLAlchemy query builders for asset categories.
"""
from sqlalchemy import select, func

from db_models.category import AssetCategory


def select_category_by_id(category_id: int):
    return select(AssetCategory).where(AssetCategory.id == category_id)


def select_category_by_code(code: str):
    return select(AssetCategory).where(AssetCategory.code == code)


def select_categories_page(page: int, page_size: int):
    """Select one page of categories ordered by code."""
    return (
        select(AssetCategory)
        .order_by(AssetCategory.code.asc(), AssetCategory.id.asc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )


def count_categories():
    return select(func.count(AssetCategory.id))


def select_all_category_codes():
    return select(AssetCategory.code)


def select_all_categories():
    return select(AssetCategory).order_by(AssetCategory.id.asc())
