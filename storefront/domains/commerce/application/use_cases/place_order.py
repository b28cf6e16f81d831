"""
Place Order Use Case

Turns a user's cart in one store into an immutable order.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import EmptyCartException, EntityNotFoundException, InsufficientStockException
from storefront.database import atomic
from storefront.domains.commerce.application.dto import OrderView
from storefront.domains.commerce.application.ports import (
    ICartRepository,
    IOrderRepository,
    IProductRepository,
    IStoreRepository,
)
from storefront.domains.commerce.domain.services import PricingService
from storefront.models.db import Order, OrderItem

logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderRequest:
    store_id: int
    user_id: int
    purchaser_name: str


class PlaceOrderUseCase:
    """
    Use Case: Place Order

    Runs as a single transaction:
    1. Load the cart lines with their products (EMPTY_CART if none)
    2. Decrement each product's stock, aborting on a negative result
    3. Price every line from the product state loaded in step 1
    4. Persist the order with one snapshot item per line
    5. Delete the cart lines that were ordered

    Any failure rolls back every step, so stock, cart and orders are left
    exactly as they were.
    """

    def __init__(
        self,
        session: AsyncSession,
        cart_repository: ICartRepository,
        product_repository: IProductRepository,
        order_repository: IOrderRepository,
        store_repository: IStoreRepository,
    ):
        self.session = session
        self.cart_repository = cart_repository
        self.product_repository = product_repository
        self.order_repository = order_repository
        self.store_repository = store_repository

    async def execute(self, request: PlaceOrderRequest) -> OrderView:
        """
        Place the order.

        Raises:
            EmptyCartException: no live cart lines for (user, store)
            InsufficientStockException: a product's stock went negative
            EntityNotFoundException: the store or a product disappeared mid-flight
        """
        async with atomic(self.session):
            lines = await self.cart_repository.list_with_products(request.user_id, request.store_id)
            if not lines:
                raise EmptyCartException(request.store_id)

            store = await self.store_repository.get(request.store_id)
            if store is None:
                raise EntityNotFoundException("Store", request.store_id)

            items: list[OrderItem] = []
            for line, product in lines:
                remaining = await self.product_repository.decrement_stock(
                    product.id, request.store_id, line.quantity
                )
                if remaining is None:
                    raise EntityNotFoundException("Product", product.id)
                if remaining < 0:
                    logger.warning(
                        f"Order rejected for user {request.user_id} in store {request.store_id}: "
                        f"product {product.id} short by {-remaining}"
                    )
                    raise InsufficientStockException(
                        product_id=product.id,
                        product_name=product.name,
                        requested=line.quantity,
                        available=remaining + line.quantity,
                    )

                priced = PricingService.price_line(product.price, line.quantity)
                items.append(
                    OrderItem(
                        product_id=product.id,
                        name=product.name,
                        sku=product.sku,
                        price=priced.unit_price,
                        quantity=priced.quantity,
                        line_total=priced.line_total,
                    )
                )

            order = Order(
                store_id=request.store_id,
                user_id=request.user_id,
                total=PricingService.order_total(item.line_total for item in items),
                items=items,
            )
            await self.order_repository.add(order)
            await self.cart_repository.delete_lines([line.id for line, _ in lines])

        logger.info(
            f"Order {order.id} placed in store {request.store_id} by user {request.user_id} "
            f"({len(items)} items, total {order.total})"
        )
        return OrderView.from_model(order, store_name=store.name, purchaser_name=request.purchaser_name)
