# app/routers/shopping_cart.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.db.functions.products import get_product_by_id
from app.db.functions.shopping_cart import (
    add_product_to_cart,
    clear_cart,
    get_cart_by_user_id,
    update_product_quantity,
)
from app.db.schemas import QuantityUpdate, ShoppingCart, User
from app.dependencies import get_current_user
from app.errors import NotFoundError, ValidationError

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=ShoppingCart)
async def get_cart(user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await get_cart_by_user_id(db, user.id)


@router.post("/products/{product_id}", response_model=ShoppingCart)
async def add_to_cart(product_id: int, user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    if await get_product_by_id(db, product_id) is None:
        raise NotFoundError("Product not found")
    return await add_product_to_cart(db, user.id, product_id)


@router.put("/products/{product_id}", response_model=ShoppingCart)
async def set_cart_quantity(
    product_id: int,
    body: QuantityUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if body.quantity < 1:
        raise ValidationError("Quantity must be greater than zero")
    await update_product_quantity(db, user.id, product_id, body.quantity)
    return await get_cart_by_user_id(db, user.id)


@router.delete("", response_model=ShoppingCart)
async def empty_cart(user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    await clear_cart(db, user.id)
    return await get_cart_by_user_id(db, user.id)
