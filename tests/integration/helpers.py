"""
Service builders shared by the integration tests.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domains.commerce.application.use_cases import (
    CartService,
    PlaceOrderUseCase,
    ProductService,
    StoreService,
)
from storefront.domains.commerce.infrastructure.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyMembershipRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyStoreRepository,
)
from storefront.models.db import CartItem, Order, Product


def cart_service(session: AsyncSession) -> CartService:
    return CartService(session, SQLAlchemyCartRepository(session), SQLAlchemyProductRepository(session))


def place_order_use_case(session: AsyncSession) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        session,
        cart_repository=SQLAlchemyCartRepository(session),
        product_repository=SQLAlchemyProductRepository(session),
        order_repository=SQLAlchemyOrderRepository(session),
        store_repository=SQLAlchemyStoreRepository(session),
    )


def store_service(session: AsyncSession) -> StoreService:
    return StoreService(session, SQLAlchemyStoreRepository(session), SQLAlchemyMembershipRepository(session))


def product_service(session: AsyncSession) -> ProductService:
    return ProductService(session, SQLAlchemyProductRepository(session))


async def stock_of(session_factory, product_id: int) -> int:
    async with session_factory() as session:
        result = await session.execute(
            select(Product.stock).where(Product.id == product_id).execution_options(include_deleted=True)
        )
        return result.scalar_one()


async def count_rows(session_factory, model) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


async def count_orders(session_factory) -> int:
    return await count_rows(session_factory, Order)


async def count_cart_lines(session_factory) -> int:
    return await count_rows(session_factory, CartItem)
