# app/db/functions/categories.py
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db import models
from app.db.schemas import Category, CategoryBase
from app.errors import storage_errors


async def get_all_categories(db: AsyncSession) -> List[Category]:
    with storage_errors("Error retrieving all categories"):
        result = await db.execute(select(models.Category))
        categories = result.scalars().all()

    return [Category.model_validate(category) for category in categories]


async def get_category_by_id(db: AsyncSession, category_id: int) -> Optional[Category]:
    """Absence is a normal outcome and returns None."""
    with storage_errors("Error retrieving category by id"):
        result = await db.execute(
            select(models.Category).filter(models.Category.category_id == category_id)
        )
        category = result.scalar_one_or_none()

    if category is None:
        return None
    return Category.model_validate(category)


async def create_category(db: AsyncSession, category: CategoryBase) -> Category:
    # only name and description are taken from the caller
    with storage_errors("Error creating category"):
        new_category = models.Category(name=category.name, description=category.description)
        db.add(new_category)
        await db.commit()
        await db.refresh(new_category)

    return Category.model_validate(new_category)


async def update_category(db: AsyncSession, category_id: int, category: CategoryBase) -> None:
    with storage_errors("Error updating category"):
        await db.execute(
            update(models.Category)
            .where(models.Category.category_id == category_id)
            .values(name=category.name, description=category.description)
        )
        await db.commit()


async def delete_category(db: AsyncSession, category_id: int) -> None:
    with storage_errors("Error deleting category"):
        await db.execute(delete(models.Category).where(models.Category.category_id == category_id))
        await db.commit()
