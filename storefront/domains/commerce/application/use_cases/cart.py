"""
Cart Service

Per-(user, store, product) pending quantities. Stock is consulted here but
only ever mutated by order placement.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import EntityNotFoundException, InsufficientStockException, ValidationException
from storefront.database import atomic
from storefront.domains.commerce.application.dto import CartLineView
from storefront.domains.commerce.application.ports import ICartRepository, IProductRepository
from storefront.domains.commerce.domain.services import PricingService
from storefront.models.db import CartItem, Product

logger = logging.getLogger(__name__)


def _view(line: CartItem, product: Product) -> CartLineView:
    return CartLineView.build(line, product, PricingService.line_total(product.price, line.quantity))


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise ValidationException("quantity must be greater than 0", field="quantity")


class CartService:
    def __init__(
        self,
        session: AsyncSession,
        cart_repository: ICartRepository,
        product_repository: IProductRepository,
    ):
        self.session = session
        self.cart_repository = cart_repository
        self.product_repository = product_repository

    def _check_stock(self, product: Product, quantity: int) -> None:
        if product.stock < quantity:
            logger.warning(f"Cart quantity {quantity} exceeds stock {product.stock} for product {product.id}")
            raise InsufficientStockException(
                product_id=product.id,
                product_name=product.name,
                requested=quantity,
                available=product.stock,
            )

    async def add(self, store_id: int, user_id: int, product_id: int, quantity: int) -> CartLineView:
        """
        Add `quantity` of a product, merging into an existing line.

        The merged quantity must not exceed current stock; on failure the
        cart is left untouched.
        """
        _require_positive(quantity)
        async with atomic(self.session):
            product = await self.product_repository.get(product_id, store_id)
            if product is None:
                raise EntityNotFoundException("Product", product_id)

            line = await self.cart_repository.get_line(user_id, store_id, product_id)
            resulting = quantity + (line.quantity if line else 0)
            self._check_stock(product, resulting)

            if line is None:
                line = await self.cart_repository.add(
                    CartItem(user_id=user_id, store_id=store_id, product_id=product_id, quantity=resulting)
                )
            else:
                line.quantity = resulting
                await self.session.flush()

            return _view(line, product)

    async def list_lines(self, store_id: int, user_id: int) -> list[CartLineView]:
        lines = await self.cart_repository.list_with_products(user_id, store_id)
        return [_view(line, product) for line, product in lines]

    async def update(self, line_id: int, store_id: int, user_id: int, quantity: int) -> CartLineView:
        """Overwrite a line's quantity after re-checking stock."""
        _require_positive(quantity)
        async with atomic(self.session):
            line = await self.cart_repository.get_by_id(line_id, user_id, store_id)
            if line is None:
                raise EntityNotFoundException("Cart item", line_id)

            product = await self.product_repository.get(line.product_id, store_id)
            if product is None:
                raise EntityNotFoundException("Product", line.product_id)

            self._check_stock(product, quantity)
            line.quantity = quantity
            await self.session.flush()
            return _view(line, product)

    async def remove(self, line_id: int, store_id: int, user_id: int) -> CartLineView:
        """Delete a line and return it as it was."""
        async with atomic(self.session):
            line = await self.cart_repository.get_by_id(line_id, user_id, store_id)
            if line is None:
                raise EntityNotFoundException("Cart item", line_id)

            # The product may have been soft-deleted since it was added
            product = await self.product_repository.get(line.product_id, store_id, include_deleted=True)
            if product is None:
                raise EntityNotFoundException("Product", line.product_id)

            view = _view(line, product)
            await self.cart_repository.delete(line)
            return view
