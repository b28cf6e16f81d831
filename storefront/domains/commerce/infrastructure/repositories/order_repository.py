"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from storefront.domains.commerce.application.ports import IOrderRepository
from storefront.models.db import Order

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    Order persistence.

    Orders are loaded with their items, store and purchaser so views can be
    built without further lazy loads.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _with_details(self):
        return select(Order).options(
            selectinload(Order.items),
            joinedload(Order.store),
            joinedload(Order.user),
        )

    async def add(self, order: Order) -> Order:
        self.session.add(order)
        await self.session.flush()
        return order

    async def get(self, order_id: int, store_id: int) -> Order | None:
        result = await self.session.execute(
            self._with_details()
            .where(Order.id == order_id, Order.store_id == store_id)
            .execution_options(include_deleted=True)
        )
        return result.scalar_one_or_none()

    async def list_page(self, store_id: int, offset: int, limit: int) -> list[Order]:
        result = await self.session.execute(
            self._with_details()
            .where(Order.store_id == store_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .offset(offset)
            .limit(limit)
            .execution_options(include_deleted=True)
        )
        return list(result.scalars().all())

    async def count(self, store_id: int) -> int:
        result = await self.session.execute(select(func.count(Order.id)).where(Order.store_id == store_id))
        return result.scalar_one()
