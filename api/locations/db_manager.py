# api/locations/db_manager.py
from sqlalchemy.ext.asyncio import AsyncSession

from db_models.location import Location
from . import queries


class LocationNotFoundError(Exception):
    """Raised when location doesn't exist."""
    pass


async def get_location_by_id(db: AsyncSession, location_id: int) -> Location:
    result = await db.execute(queries.select_location_by_id(location_id))
    location = result.scalar_one_or_none()
    if location is None:
        raise LocationNotFoundError(f"Location {location_id} not found")
    return location


async def list_locations(db: AsyncSession, page: int, page_size: int) -> tuple[list[Location], int]:
    result = await db.execute(queries.count_locations())
    total = result.scalar() or 0

    result = await db.execute(queries.select_locations_page(page, page_size))
    return list(result.scalars().all()), total


async def list_all_locations(db: AsyncSession) -> list[Location]:
    result = await db.execute(queries.select_all_locations())
    return list(result.scalars().all())
