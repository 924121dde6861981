# api/locations/views.py
"""
Location endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session
from .models import LocationRead, LocationPage
from . import db_manager

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get(
    "",
    response_model=LocationPage,
    summary="List locations",
)
async def list_locations_endpoint(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=1000),
    db: AsyncSession = Depends(get_session),
) -> LocationPage:
    locations, total = await db_manager.list_locations(db, page, page_size)
    return LocationPage(
        data=[LocationRead.model_validate(loc) for loc in locations],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/{location_id}",
    response_model=LocationRead,
    summary="Get location by ID",
)
async def get_location_endpoint(
    location_id: int,
    db: AsyncSession = Depends(get_session),
) -> LocationRead:
    try:
        location = await db_manager.get_location_by_id(db, location_id)
    except db_manager.LocationNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return LocationRead.model_validate(location)
