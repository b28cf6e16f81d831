"""
Commerce API Dependencies

Builds the commerce services around the request's database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database.async_db import get_async_db
from storefront.domains.commerce.application.use_cases import (
    CartService,
    CategoryService,
    GetOrdersUseCase,
    GetOrderUseCase,
    MembershipService,
    PlaceOrderUseCase,
    ProductService,
    StoreService,
)
from storefront.domains.commerce.infrastructure.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyMembershipRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyStoreRepository,
)
from storefront.repositories import UserRepository


def get_store_service(db: AsyncSession = Depends(get_async_db)) -> StoreService:  # noqa: B008
    return StoreService(db, SQLAlchemyStoreRepository(db), SQLAlchemyMembershipRepository(db))


def get_membership_service(db: AsyncSession = Depends(get_async_db)) -> MembershipService:  # noqa: B008
    return MembershipService(db, SQLAlchemyMembershipRepository(db), UserRepository(db))


def get_category_service(db: AsyncSession = Depends(get_async_db)) -> CategoryService:  # noqa: B008
    return CategoryService(db, SQLAlchemyCategoryRepository(db))


def get_product_service(db: AsyncSession = Depends(get_async_db)) -> ProductService:  # noqa: B008
    return ProductService(db, SQLAlchemyProductRepository(db))


def get_cart_service(db: AsyncSession = Depends(get_async_db)) -> CartService:  # noqa: B008
    return CartService(db, SQLAlchemyCartRepository(db), SQLAlchemyProductRepository(db))


def get_place_order_use_case(db: AsyncSession = Depends(get_async_db)) -> PlaceOrderUseCase:  # noqa: B008
    return PlaceOrderUseCase(
        db,
        cart_repository=SQLAlchemyCartRepository(db),
        product_repository=SQLAlchemyProductRepository(db),
        order_repository=SQLAlchemyOrderRepository(db),
        store_repository=SQLAlchemyStoreRepository(db),
    )


def get_orders_use_case(db: AsyncSession = Depends(get_async_db)) -> GetOrdersUseCase:  # noqa: B008
    return GetOrdersUseCase(SQLAlchemyOrderRepository(db))


def get_order_use_case(db: AsyncSession = Depends(get_async_db)) -> GetOrderUseCase:  # noqa: B008
    return GetOrderUseCase(SQLAlchemyOrderRepository(db))
