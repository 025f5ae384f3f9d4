"""
Data-access tests for the shopping cart.

Seeded products: 1 (499.99), 2 (899.99), 5 (99.50). User 1 starts with an
empty cart.
"""
import asyncio
from decimal import Decimal

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.functions.shopping_cart import (
    add_product_to_cart,
    clear_cart,
    get_cart_by_user_id,
    update_product_quantity,
)
from app.db.models import ShoppingCartItem as CartRow


async def test_empty_cart(db_session):
    cart = await get_cart_by_user_id(db_session, 1)

    assert cart.items == {}
    assert cart.total == 0


async def test_add_product_to_empty_cart(db_session):
    cart = await add_product_to_cart(db_session, 1, 5)

    assert list(cart.items) == [5]
    assert cart.get(5).quantity == 1
    assert cart.get(5).product.name == "Headphones"


async def test_add_same_product_twice_increments_quantity(db_session):
    await add_product_to_cart(db_session, 1, 5)
    cart = await add_product_to_cart(db_session, 1, 5)

    assert len(cart.items) == 1
    assert cart.get(5).quantity == 2
    assert cart.get(5).line_total == Decimal("199.00")

    rows = (await db_session.execute(select(CartRow).where(CartRow.user_id == 1))).scalars().all()
    assert len(rows) == 1


async def test_carts_are_per_user(db_session):
    await add_product_to_cart(db_session, 1, 1)
    await add_product_to_cart(db_session, 2, 2)

    cart = await get_cart_by_user_id(db_session, 1)
    assert cart.contains(1)
    assert not cart.contains(2)


async def test_cart_total(db_session):
    await add_product_to_cart(db_session, 1, 1)
    await add_product_to_cart(db_session, 1, 5)
    cart = await add_product_to_cart(db_session, 1, 5)

    assert cart.total == Decimal("698.99")


async def test_update_quantity_sets_exact_value(db_session):
    await add_product_to_cart(db_session, 1, 5)
    await add_product_to_cart(db_session, 1, 5)

    await update_product_quantity(db_session, 1, 5, 10)

    cart = await get_cart_by_user_id(db_session, 1)
    assert cart.get(5).quantity == 10


async def test_update_quantity_missing_row_is_noop(db_session):
    await update_product_quantity(db_session, 1, 5, 10)

    assert (await get_cart_by_user_id(db_session, 1)).items == {}


async def test_clear_cart_is_idempotent(db_session):
    await add_product_to_cart(db_session, 1, 1)
    await add_product_to_cart(db_session, 1, 5)
    await update_product_quantity(db_session, 1, 5, 10)

    await clear_cart(db_session, 1)
    await clear_cart(db_session, 1)

    assert (await get_cart_by_user_id(db_session, 1)).items == {}


async def test_clear_cart_leaves_other_users(db_session):
    await add_product_to_cart(db_session, 1, 1)
    await add_product_to_cart(db_session, 2, 1)

    await clear_cart(db_session, 1)

    assert (await get_cart_by_user_id(db_session, 2)).contains(1)


async def test_orphaned_line_is_skipped(db_session):
    await add_product_to_cart(db_session, 1, 1)
    await db_session.execute(insert(CartRow).values(user_id=1, product_id=999, quantity=3))
    await db_session.commit()

    cart = await get_cart_by_user_id(db_session, 1)

    assert list(cart.items) == [1]


async def test_concurrent_adds_produce_one_row(db_session):
    engine = db_session.bind

    async def add_once():
        async with AsyncSession(engine, expire_on_commit=False) as session:
            await add_product_to_cart(session, 1, 5)

    await asyncio.gather(*(add_once() for _ in range(5)))

    rows = (await db_session.execute(select(CartRow).where(CartRow.user_id == 1))).scalars().all()
    assert len(rows) == 1
    assert rows[0].quantity == 5
