# api/dashboard/views.py
"""
Dashboard statistics endpoint.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session
from .models import DashboardStats
from . import db_manager

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Get dashboard statistics",
)
async def get_dashboard_stats_endpoint(
    db: AsyncSession = Depends(get_session),
) -> DashboardStats:
    """
    Status counts, value estimates, category/location/source rollups and the
    six-month acquisition series, computed over all assets.
    """
    return await db_manager.get_dashboard_stats(db)
