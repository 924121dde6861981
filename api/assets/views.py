# api/assets/views.py
"""
Asset listing and bulk group endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session
from .models import AssetRead, AssetPage, BulkAssetsResponse
from . import db_manager

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get(
    "",
    response_model=AssetPage,
    summary="List assets",
)
async def list_assets_endpoint(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=1000),
    db: AsyncSession = Depends(get_session),
) -> AssetPage:
    assets, total = await db_manager.list_assets(db, page, page_size)
    return AssetPage(
        data=[AssetRead.model_validate(a) for a in assets],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/bulk/{bulk_id}",
    response_model=BulkAssetsResponse,
    summary="List the assets of a bulk group",
)
async def list_bulk_assets_endpoint(
    bulk_id: str,
    db: AsyncSession = Depends(get_session),
) -> BulkAssetsResponse:
    """
    Return the child assets that share `bulk_id`, ordered by sequence.
    The parent row is not included.
    """
    children = await db_manager.list_bulk_children(db, bulk_id)
    return BulkAssetsResponse(
        bulk_id=bulk_id,
        data=[AssetRead.model_validate(a) for a in children],
    )


@router.get(
    "/{asset_id}",
    response_model=AssetRead,
    summary="Get asset by ID",
)
async def get_asset_endpoint(
    asset_id: int,
    db: AsyncSession = Depends(get_session),
) -> AssetRead:
    try:
        asset = await db_manager.get_asset_by_id(db, asset_id)
    except db_manager.AssetNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return AssetRead.model_validate(asset)
