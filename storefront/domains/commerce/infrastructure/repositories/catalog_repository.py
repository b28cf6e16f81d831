"""
Catalog Repository Implementations

SQLAlchemy implementations of ICategoryRepository and IProductRepository.
Every read is scoped to one store; soft-deleted rows are filtered by the
session-wide soft-delete hook.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domains.commerce.application.ports import ICategoryRepository, IProductRepository
from storefront.models.db import CartItem, Category, Product

logger = logging.getLogger(__name__)


class SQLAlchemyCategoryRepository(ICategoryRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, category_id: int, store_id: int) -> Category | None:
        result = await self.session.execute(
            select(Category).where(Category.id == category_id, Category.store_id == store_id)
        )
        return result.scalar_one_or_none()

    async def list_for_store(self, store_id: int) -> list[Category]:
        result = await self.session.execute(
            select(Category).where(Category.store_id == store_id).order_by(Category.name)
        )
        return list(result.scalars().all())

    async def add(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        return category


class SQLAlchemyProductRepository(IProductRepository):
    """
    Product persistence.

    `decrement_stock` is the only write path that touches stock.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, product_id: int, store_id: int, include_deleted: bool = False) -> Product | None:
        result = await self.session.execute(
            select(Product)
            .where(Product.id == product_id, Product.store_id == store_id)
            .execution_options(include_deleted=include_deleted)
        )
        return result.scalar_one_or_none()

    async def get_by_sku(self, sku: str, store_id: int) -> Product | None:
        result = await self.session.execute(
            select(Product).where(Product.sku == sku, Product.store_id == store_id)
        )
        return result.scalar_one_or_none()

    async def add(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        return product

    async def soft_delete(self, product: Product) -> None:
        product.is_deleted = True
        await self.session.execute(
            delete(CartItem).where(CartItem.product_id == product.id).execution_options(synchronize_session=False)
        )
        await self.session.flush()

    async def decrement_stock(self, product_id: int, store_id: int, quantity: int) -> int | None:
        """
        UPDATE ... SET stock = stock - :quantity ... RETURNING stock.

        The row lock taken by the UPDATE is held until the surrounding
        transaction ends, so concurrent callers observe each other's
        decrements in commit order.
        """
        result = await self.session.execute(
            update(Product)
            .where(
                Product.id == product_id,
                Product.store_id == store_id,
                Product.is_deleted.is_(False),
            )
            .values(stock=Product.stock - quantity)
            .returning(Product.stock)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none()
