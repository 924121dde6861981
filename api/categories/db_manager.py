# api/categories/db_manager.py
"""
Business logic for asset category management.
"""
import logging
import re

from sqlalchemy.ext.asyncio import AsyncSession

from db_models.category import AssetCategory
from . import queries

logger = logging.getLogger(__name__)

CODE_STEP = 10
_NUMERIC_CODE = re.compile(r"^(\d+)$")


class CategoryNotFoundError(Exception):
    """Raised when category doesn't exist."""
    pass


class DuplicateCategoryCodeError(Exception):
    """Raised when category code already exists."""
    pass


def generate_next_code(existing_codes: list[str]) -> str:
    """
    Suggest the next category code.

    Codes are numbered in steps of 10; non-numeric codes are ignored.
    """
    numeric = []
    for code in existing_codes:
        match = _NUMERIC_CODE.match(code or "")
        if match and int(match.group(1)) > 0:
            numeric.append(int(match.group(1)))
    highest = max(numeric) if numeric else 0
    return str(highest + CODE_STEP)


async def get_category_by_id(db: AsyncSession, category_id: int) -> AssetCategory:
    """Get a category by ID. Raises CategoryNotFoundError if not found."""
    result = await db.execute(queries.select_category_by_id(category_id))
    category = result.scalar_one_or_none()
    if category is None:
        raise CategoryNotFoundError(f"Category {category_id} not found")
    return category


async def list_categories(db: AsyncSession, page: int, page_size: int) -> tuple[list[AssetCategory], int]:
    """Return one page of categories and the total count."""
    result = await db.execute(queries.count_categories())
    total = result.scalar() or 0

    result = await db.execute(queries.select_categories_page(page, page_size))
    return list(result.scalars().all()), total


async def list_all_categories(db: AsyncSession) -> list[AssetCategory]:
    result = await db.execute(queries.select_all_categories())
    return list(result.scalars().all())


async def next_category_code(db: AsyncSession) -> str:
    result = await db.execute(queries.select_all_category_codes())
    return generate_next_code(list(result.scalars().all()))


async def _ensure_code_free(db: AsyncSession, code: str, exclude_id: int | None = None) -> None:
    result = await db.execute(queries.select_category_by_code(code))
    existing = result.scalar_one_or_none()
    if existing is not None and existing.id != exclude_id:
        raise DuplicateCategoryCodeError(f"Category with code '{code}' already exists")


async def create_category(
    db: AsyncSession,
    code: str,
    name: str,
    description: str | None = None,
) -> AssetCategory:
    """
    Create a new category.

    Raises:
        DuplicateCategoryCodeError: If code already exists
    """
    await _ensure_code_free(db, code)

    category = AssetCategory(code=code, name=name, description=description)
    db.add(category)
    await db.commit()
    await db.refresh(category)
    logger.info("Created category %s (%s)", category.id, category.code)
    return category


async def update_category(db: AsyncSession, category_id: int, changes: dict) -> AssetCategory:
    """
    Apply a partial update to a category.

    Raises:
        CategoryNotFoundError: If category doesn't exist
        DuplicateCategoryCodeError: If the new code belongs to another category
    """
    category = await get_category_by_id(db, category_id)

    if "code" in changes and changes["code"] != category.code:
        await _ensure_code_free(db, changes["code"], exclude_id=category.id)

    for field, value in changes.items():
        setattr(category, field, value)

    await db.commit()
    await db.refresh(category)
    return category


async def delete_category(db: AsyncSession, category_id: int) -> None:
    """Delete a category. Assets keep existing with no category."""
    category = await get_category_by_id(db, category_id)
    await db.delete(category)
    await db.commit()
    logger.info("Deleted category %s", category_id)
