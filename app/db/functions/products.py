# app/db/functions/products.py
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db import models
from app.db.schemas import Product
from app.errors import storage_errors


async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
    with storage_errors("Error retrieving product by id"):
        result = await db.execute(select(models.Product).filter(models.Product.product_id == product_id))
        product = result.scalar_one_or_none()

    if product is None:
        return None
    return Product.model_validate(product)
