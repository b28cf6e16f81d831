"""
Cart Repository Implementation
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domains.commerce.application.ports import ICartRepository
from storefront.models.db import CartItem, Product

logger = logging.getLogger(__name__)


class SQLAlchemyCartRepository(ICartRepository):
    """Cart lines keyed by (user, store, product)."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_line(self, user_id: int, store_id: int, product_id: int) -> CartItem | None:
        result = await self.session.execute(
            select(CartItem).where(
                CartItem.user_id == user_id,
                CartItem.store_id == store_id,
                CartItem.product_id == product_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, line_id: int, user_id: int, store_id: int) -> CartItem | None:
        result = await self.session.execute(
            select(CartItem).where(
                CartItem.id == line_id,
                CartItem.user_id == user_id,
                CartItem.store_id == store_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_with_products(self, user_id: int, store_id: int) -> list[tuple[CartItem, Product]]:
        """
        Lines for (user, store) joined to their product.

        The inner join drops lines whose product has been soft-deleted.
        """
        result = await self.session.execute(
            select(CartItem, Product)
            .join(Product, Product.id == CartItem.product_id)
            .where(CartItem.user_id == user_id, CartItem.store_id == store_id)
            .order_by(CartItem.id)
        )
        return [(line, product) for line, product in result.all()]

    async def add(self, line: CartItem) -> CartItem:
        self.session.add(line)
        await self.session.flush()
        return line

    async def delete(self, line: CartItem) -> None:
        await self.session.delete(line)
        await self.session.flush()

    async def delete_lines(self, line_ids: list[int]) -> int:
        if not line_ids:
            return 0
        result = await self.session.execute(
            delete(CartItem).where(CartItem.id.in_(line_ids)).execution_options(synchronize_session=False)
        )
        return result.rowcount
