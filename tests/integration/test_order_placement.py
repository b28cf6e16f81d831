"""
Integration tests for order placement against a real database.
"""

import asyncio
from decimal import Decimal

import pytest
from sqlalchemy import update

from storefront.core.domain import EmptyCartException, InsufficientStockException
from storefront.domains.commerce.application.dto import OrderView
from storefront.domains.commerce.application.use_cases import GetOrdersUseCase, PlaceOrderRequest
from storefront.domains.commerce.domain.value_objects import Role
from storefront.domains.commerce.infrastructure.repositories import SQLAlchemyOrderRepository
from storefront.models.db import Product

from .helpers import cart_service, count_cart_lines, count_orders, place_order_use_case, stock_of


@pytest.mark.integration
class TestOrderPlacement:
    @pytest.mark.asyncio
    async def test_cart_to_order_scenario(self, session_factory, make_user, make_store, make_product):
        owner = await make_user(name="Ana Owner")
        store = await make_store(owner)
        product = await make_product(store, price="9.99", stock=10)

        async with session_factory() as session:
            cart = cart_service(session)
            line = await cart.add(store.id, owner.id, product.id, 4)
            assert line.quantity == 4

            with pytest.raises(InsufficientStockException):
                await cart.add(store.id, owner.id, product.id, 7)

            lines = await cart.list_lines(store.id, owner.id)
            assert [(line.product_id, line.quantity) for line in lines] == [(product.id, 4)]

        async with session_factory() as session:
            order = await place_order_use_case(session).execute(
                PlaceOrderRequest(store_id=store.id, user_id=owner.id, purchaser_name=owner.name)
            )

        assert order.total == Decimal("39.96")
        assert order.store_name == "Corner Shop"
        assert order.purchaser_name == "Ana Owner"
        assert len(order.items) == 1
        assert order.items[0].price == Decimal("9.99")
        assert order.items[0].quantity == 4
        assert await stock_of(session_factory, product.id) == 6

        async with session_factory() as session:
            assert await cart_service(session).list_lines(store.id, owner.id) == []

    @pytest.mark.asyncio
    async def test_insufficient_stock_rolls_back_everything(
        self, session_factory, make_user, make_store, make_product
    ):
        owner = await make_user()
        store = await make_store(owner)
        plenty = await make_product(store, sku="SKU-A", stock=10)
        scarce = await make_product(store, sku="SKU-B", stock=1)

        async with session_factory() as session:
            cart = cart_service(session)
            await cart.add(store.id, owner.id, plenty.id, 2)
            await cart.add(store.id, owner.id, scarce.id, 1)

        # Someone else empties the scarce product after it was carted
        async with session_factory() as session:
            await session.execute(update(Product).where(Product.id == scarce.id).values(stock=0))
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(InsufficientStockException) as exc_info:
                await place_order_use_case(session).execute(
                    PlaceOrderRequest(store_id=store.id, user_id=owner.id, purchaser_name=owner.name)
                )
        assert exc_info.value.product_id == scarce.id

        assert await stock_of(session_factory, plenty.id) == 10
        assert await stock_of(session_factory, scarce.id) == 0
        assert await count_orders(session_factory) == 0
        assert await count_cart_lines(session_factory) == 2

    @pytest.mark.asyncio
    async def test_empty_cart_creates_nothing(self, session_factory, make_user, make_store):
        owner = await make_user()
        store = await make_store(owner)

        async with session_factory() as session:
            with pytest.raises(EmptyCartException):
                await place_order_use_case(session).execute(
                    PlaceOrderRequest(store_id=store.id, user_id=owner.id, purchaser_name=owner.name)
                )

        assert await count_orders(session_factory) == 0

    @pytest.mark.asyncio
    async def test_order_survives_later_price_change(self, session_factory, make_user, make_store, make_product):
        owner = await make_user()
        store = await make_store(owner)
        product = await make_product(store, price="5.00", stock=3)

        async with session_factory() as session:
            await cart_service(session).add(store.id, owner.id, product.id, 2)
        async with session_factory() as session:
            placed = await place_order_use_case(session).execute(
                PlaceOrderRequest(store_id=store.id, user_id=owner.id, purchaser_name=owner.name)
            )

        async with session_factory() as session:
            await session.execute(update(Product).where(Product.id == product.id).values(price=Decimal("7.00")))
            await session.commit()

        async with session_factory() as session:
            page = await GetOrdersUseCase(SQLAlchemyOrderRepository(session)).execute(store.id)

        assert page.orders[0].id == placed.id
        assert page.orders[0].items[0].price == Decimal("5.00")
        assert page.orders[0].total == Decimal("10.00")

    @pytest.mark.asyncio
    async def test_concurrent_orders_never_oversell(
        self, session_factory, make_user, make_store, make_product, add_member
    ):
        owner = await make_user()
        cashier = await make_user(name="Carl Cashier", email="cashier@example.com")
        store = await make_store(owner)
        await add_member(store, cashier, Role.CASHIER)
        product = await make_product(store, stock=1)

        for user in (owner, cashier):
            async with session_factory() as session:
                await cart_service(session).add(store.id, user.id, product.id, 1)

        async def attempt(user):
            async with session_factory() as session:
                return await place_order_use_case(session).execute(
                    PlaceOrderRequest(store_id=store.id, user_id=user.id, purchaser_name=user.name)
                )

        results = await asyncio.gather(attempt(owner), attempt(cashier), return_exceptions=True)

        placed = [result for result in results if isinstance(result, OrderView)]
        failed = [result for result in results if isinstance(result, BaseException)]
        assert len(placed) == 1
        assert len(failed) == 1
        assert isinstance(failed[0], InsufficientStockException)
        assert await stock_of(session_factory, product.id) == 0
        assert await count_orders(session_factory) == 1


@pytest.mark.integration
class TestOrderListing:
    @pytest.mark.asyncio
    async def test_pages_newest_first(self, session_factory, make_user, make_store, make_product):
        owner = await make_user()
        store = await make_store(owner)
        product = await make_product(store, stock=10)

        placed_ids = []
        for _ in range(3):
            async with session_factory() as session:
                await cart_service(session).add(store.id, owner.id, product.id, 1)
            async with session_factory() as session:
                order = await place_order_use_case(session).execute(
                    PlaceOrderRequest(store_id=store.id, user_id=owner.id, purchaser_name=owner.name)
                )
                placed_ids.append(order.id)

        async with session_factory() as session:
            use_case = GetOrdersUseCase(SQLAlchemyOrderRepository(session))
            first = await use_case.execute(store.id, page=1, size=2)
            second = await use_case.execute(store.id, page=2, size=2)

        assert [order.id for order in first.orders] == placed_ids[::-1][:2]
        assert [order.id for order in second.orders] == placed_ids[:1]
        assert first.paging.total_page == 2
        assert first.paging.current_page == 1
        assert first.orders[0].purchaser_name == owner.name
