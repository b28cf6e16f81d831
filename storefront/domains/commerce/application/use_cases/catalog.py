"""
Catalog Services: categories and products
"""

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import DuplicateEntityException, EntityNotFoundException
from storefront.database import atomic
from storefront.domains.commerce.application.ports import ICategoryRepository, IProductRepository
from storefront.models.db import Category, Product

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, session: AsyncSession, category_repository: ICategoryRepository):
        self.session = session
        self.category_repository = category_repository

    async def _get(self, category_id: int, store_id: int) -> Category:
        category = await self.category_repository.get(category_id, store_id)
        if category is None:
            raise EntityNotFoundException("Category", category_id)
        return category

    async def create(self, store_id: int, name: str) -> Category:
        async with atomic(self.session):
            category = await self.category_repository.add(Category(store_id=store_id, name=name))
        return category

    async def list_for_store(self, store_id: int) -> list[Category]:
        return await self.category_repository.list_for_store(store_id)

    async def update(self, category_id: int, store_id: int, name: str) -> Category:
        async with atomic(self.session):
            category = await self._get(category_id, store_id)
            category.name = name
            await self.session.flush()
        return category

    async def remove(self, category_id: int, store_id: int) -> Category:
        async with atomic(self.session):
            category = await self._get(category_id, store_id)
            category.is_deleted = True
            await self.session.flush()
        return category


class ProductService:
    """Product CRUD. SKUs are unique among live products of a store."""

    UPDATABLE_FIELDS = ("name", "sku", "price", "stock")

    def __init__(self, session: AsyncSession, product_repository: IProductRepository):
        self.session = session
        self.product_repository = product_repository

    async def _ensure_sku_free(self, sku: str, store_id: int, product_id: int | None = None) -> None:
        existing = await self.product_repository.get_by_sku(sku, store_id)
        if existing is not None and existing.id != product_id:
            raise DuplicateEntityException("Product", "sku", sku)

    async def create(self, store_id: int, name: str, sku: str, price: Decimal, stock: int) -> Product:
        async with atomic(self.session):
            await self._ensure_sku_free(sku, store_id)
            product = await self.product_repository.add(
                Product(store_id=store_id, name=name, sku=sku, price=price, stock=stock)
            )
        logger.info(f"Product {product.id} ({sku}) created in store {store_id}")
        return product

    async def get_by_sku(self, sku: str, store_id: int) -> Product:
        product = await self.product_repository.get_by_sku(sku, store_id)
        if product is None:
            raise EntityNotFoundException("Product", sku)
        return product

    async def update(self, product_id: int, store_id: int, changes: dict[str, Any]) -> Product:
        async with atomic(self.session):
            product = await self.product_repository.get(product_id, store_id)
            if product is None:
                raise EntityNotFoundException("Product", product_id)

            sku = changes.get("sku")
            if sku is not None and sku != product.sku:
                await self._ensure_sku_free(sku, store_id, product_id)

            for field_name in self.UPDATABLE_FIELDS:
                if changes.get(field_name) is not None:
                    setattr(product, field_name, changes[field_name])
            await self.session.flush()
        return product

    async def remove(self, product_id: int, store_id: int) -> Product:
        async with atomic(self.session):
            product = await self.product_repository.get(product_id, store_id)
            if product is None:
                raise EntityNotFoundException("Product", product_id)
            await self.product_repository.soft_delete(product)
        logger.info(f"Product {product_id} removed from store {store_id}")
        return product
