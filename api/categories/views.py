# api/categories/views.py
"""
Asset category endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session
from .models import (
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
    CategoryPage,
    NextCategoryCode,
)
from . import db_manager

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=CategoryPage,
    summary="List asset categories",
)
async def list_categories_endpoint(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=1000),
    db: AsyncSession = Depends(get_session),
) -> CategoryPage:
    categories, total = await db_manager.list_categories(db, page, page_size)
    return CategoryPage(
        data=[CategoryRead.model_validate(c) for c in categories],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/next-code",
    response_model=NextCategoryCode,
    summary="Suggest the code for a new category",
)
async def next_code_endpoint(
    db: AsyncSession = Depends(get_session),
) -> NextCategoryCode:
    """
    Highest numeric code plus 10, or "10" when no numeric codes exist.
    """
    code = await db_manager.next_category_code(db)
    return NextCategoryCode(code=code)


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get asset category by ID",
)
async def get_category_endpoint(
    category_id: int,
    db: AsyncSession = Depends(get_session),
) -> CategoryRead:
    try:
        category = await db_manager.get_category_by_id(db, category_id)
    except db_manager.CategoryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return CategoryRead.model_validate(category)


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an asset category",
)
async def create_category_endpoint(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_session),
) -> CategoryRead:
    try:
        category = await db_manager.create_category(
            db,
            code=payload.code,
            name=payload.name,
            description=payload.description,
        )
    except db_manager.DuplicateCategoryCodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc
    return CategoryRead.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update an asset category",
)
async def update_category_endpoint(
    category_id: int,
    payload: CategoryUpdate,
    db: AsyncSession = Depends(get_session),
) -> CategoryRead:
    try:
        category = await db_manager.update_category(
            db, category_id, payload.model_dump(exclude_unset=True, exclude_none=True)
        )
    except db_manager.CategoryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except db_manager.DuplicateCategoryCodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc
    return CategoryRead.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an asset category",
)
async def delete_category_endpoint(
    category_id: int,
    db: AsyncSession = Depends(get_session),
) -> Response:
    try:
        await db_manager.delete_category(db, category_id)
    except db_manager.CategoryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
