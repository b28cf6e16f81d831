"""
Order lookups for a store
"""

import math

from storefront.core.domain import EntityNotFoundException, ValidationException
from storefront.domains.commerce.application.dto import OrderPage, OrderView, PagingView
from storefront.domains.commerce.application.ports import IOrderRepository
from storefront.models.db import Order

MAX_PAGE_SIZE = 100


def _to_view(order: Order) -> OrderView:
    return OrderView.from_model(order, store_name=order.store.name, purchaser_name=order.user.name)


class GetOrdersUseCase:
    """Paginated order listing, newest first."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, store_id: int, page: int = 1, size: int = 10) -> OrderPage:
        if page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if not 1 <= size <= MAX_PAGE_SIZE:
            raise ValidationException(f"size must be between 1 and {MAX_PAGE_SIZE}", field="size")

        total = await self.order_repository.count(store_id)
        orders = await self.order_repository.list_page(store_id, offset=(page - 1) * size, limit=size)
        return OrderPage(
            orders=[_to_view(order) for order in orders],
            paging=PagingView(current_page=page, size=size, total_page=math.ceil(total / size)),
        )


class GetOrderUseCase:
    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: int, store_id: int) -> OrderView:
        order = await self.order_repository.get(order_id, store_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        return _to_view(order)
