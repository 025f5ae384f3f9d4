# app/routers/categories.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.db.functions.categories import (
    create_category,
    delete_category,
    get_all_categories,
    get_category_by_id,
    update_category,
)
from app.db.schemas import Category, CategoryBase
from app.dependencies import require_admin
from app.errors import NotFoundError

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[Category])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await get_all_categories(db)


@router.get("/{category_id}", response_model=Category)
async def read_category(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await get_category_by_id(db, category_id)
    if category is None:
        raise NotFoundError("Category not found")
    return category


@router.post("", response_model=Category, status_code=201, dependencies=[Depends(require_admin)])
async def add_category(category: CategoryBase, db: AsyncSession = Depends(get_db)):
    return await create_category(db, category)


@router.put("/{category_id}", response_model=Category, dependencies=[Depends(require_admin)])
async def edit_category(category_id: int, category: CategoryBase, db: AsyncSession = Depends(get_db)):
    if await get_category_by_id(db, category_id) is None:
        raise NotFoundError("Category not found")
    await update_category(db, category_id, category)
    return await get_category_by_id(db, category_id)


@router.delete("/{category_id}", status_code=204, dependencies=[Depends(require_admin)])
async def remove_category(category_id: int, db: AsyncSession = Depends(get_db)):
    if await get_category_by_id(db, category_id) is None:
        raise NotFoundError("Category not found")
    await delete_category(db, category_id)
    return Response(status_code=204)
