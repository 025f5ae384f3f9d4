# app/db/functions/shopping_cart.py
import logging

from sqlalchemy import delete, update
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db.models import ShoppingCartItem as CartRow
from app.db.schemas import ShoppingCart, ShoppingCartItem
from app.db.functions.products import get_product_by_id
from app.errors import StorageError, storage_errors

logger = logging.getLogger(__name__)


def _increment_or_insert(dialect_name: str, user_id: int, product_id: int):
    """Single-statement upsert: insert quantity 1, or add 1 to the existing row."""
    values = {"user_id": user_id, "product_id": product_id, "quantity": 1}

    if dialect_name == "mysql":
        stmt = mysql.insert(CartRow).values(**values)
        return stmt.on_duplicate_key_update(quantity=CartRow.quantity + 1)

    if dialect_name == "postgresql":
        stmt = postgresql.insert(CartRow).values(**values)
    elif dialect_name == "sqlite":
        stmt = sqlite.insert(CartRow).values(**values)
    else:
        raise StorageError(f"Cart upsert is not supported for {dialect_name}")

    return stmt.on_conflict_do_update(
        index_elements=["user_id", "product_id"],
        set_={"quantity": CartRow.quantity + 1},
    )


async def get_cart_by_user_id(db: AsyncSession, user_id: int) -> ShoppingCart:
    """
    Build the user's cart from its (product_id, quantity) rows.
    Lines whose product no longer exists are skipped.
    """
    cart = ShoppingCart()

    with storage_errors("Error retrieving shopping cart"):
        result = await db.execute(
            select(CartRow.product_id, CartRow.quantity).where(CartRow.user_id == user_id)
        )
        rows = result.all()

    for product_id, quantity in rows:
        product = await get_product_by_id(db, product_id)
        if product is None:
            logger.warning("Skipping cart line for missing product %s (user %s)", product_id, user_id)
            continue
        cart.add(ShoppingCartItem(product=product, quantity=quantity))

    return cart


async def add_product_to_cart(db: AsyncSession, user_id: int, product_id: int) -> ShoppingCart:
    with storage_errors("Error adding product to cart"):
        stmt = _increment_or_insert(db.get_bind().dialect.name, user_id, product_id)
        await db.execute(stmt)
        await db.commit()

    return await get_cart_by_user_id(db, user_id)


async def update_product_quantity(db: AsyncSession, user_id: int, product_id: int, quantity: int) -> None:
    # no validation here; missing rows are left alone
    with storage_errors("Error updating cart quantity"):
        await db.execute(
            update(CartRow)
            .where(CartRow.user_id == user_id, CartRow.product_id == product_id)
            .values(quantity=quantity)
        )
        await db.commit()


async def clear_cart(db: AsyncSession, user_id: int) -> None:
    with storage_errors("Error clearing cart"):
        await db.execute(delete(CartRow).where(CartRow.user_id == user_id))
        await db.commit()
