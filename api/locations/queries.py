# api/locations/queries.py
"""
SQLAlchemy query builders for locations.
"""
from sqlalchemy import select, func

from db_models.location import Location


def select_location_by_id(location_id: int):
    return select(Location).where(Location.id == location_id)


def select_locations_page(page: int, page_size: int):
    return (
        select(Location)
        .order_by(Location.code.asc(), Location.id.asc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )


def count_locations():
    return select(func.count(Location.id))


def select_all_locations():
    return select(Location).order_by(Location.id.asc())
