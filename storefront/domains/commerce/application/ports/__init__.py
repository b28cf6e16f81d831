"""
Commerce Application Ports

Repository contracts used by the use cases. Uses Protocol for structural typing.
"""

from typing import Protocol, runtime_checkable

from storefront.domains.commerce.domain.value_objects import Role
from storefront.models.db import CartItem, Category, Order, Product, Store, UserDB, UserStore


@runtime_checkable
class IRoleResolver(Protocol):
    """Looks up the role a user holds in a store."""

    async def get_role(self, user_id: int, store_id: int) -> Role | None:
        """Return the role, or None when the user is not a member"""
        ...


@runtime_checkable
class IStoreRepository(Protocol):
    async def get(self, store_id: int) -> Store | None:
        ...

    async def add(self, store: Store) -> Store:
        ...

    async def soft_delete_cascade(self, store_id: int) -> None:
        """Flag the store, its categories and its products as deleted and drop its cart lines"""
        ...


@runtime_checkable
class IMembershipRepository(IRoleResolver, Protocol):
    async def get(self, membership_id: int, store_id: int) -> UserStore | None:
        ...

    async def get_for_user(self, user_id: int, store_id: int) -> UserStore | None:
        ...

    async def add(self, membership: UserStore) -> UserStore:
        ...

    async def delete(self, membership: UserStore) -> None:
        ...


@runtime_checkable
class ICategoryRepository(Protocol):
    async def get(self, category_id: int, store_id: int) -> Category | None:
        ...

    async def list_for_store(self, store_id: int) -> list[Category]:
        ...

    async def add(self, category: Category) -> Category:
        ...


@runtime_checkable
class IProductRepository(Protocol):
    async def get(self, product_id: int, store_id: int, include_deleted: bool = False) -> Product | None:
        ...

    async def get_by_sku(self, sku: str, store_id: int) -> Product | None:
        ...

    async def add(self, product: Product) -> Product:
        ...

    async def soft_delete(self, product: Product) -> None:
        """Flag the product as deleted and drop every cart line holding it"""
        ...

    async def decrement_stock(self, product_id: int, store_id: int, quantity: int) -> int | None:
        """
        Subtract `quantity` from the live product's stock in one statement.

        Returns the stock after the update, or None when no live row matched.
        """
        ...


@runtime_checkable
class ICartRepository(Protocol):
    async def get_line(self, user_id: int, store_id: int, product_id: int) -> CartItem | None:
        ...

    async def get_by_id(self, line_id: int, user_id: int, store_id: int) -> CartItem | None:
        ...

    async def list_with_products(self, user_id: int, store_id: int) -> list[tuple[CartItem, Product]]:
        """Lines whose product is live, each paired with that product"""
        ...

    async def add(self, line: CartItem) -> CartItem:
        ...

    async def delete(self, line: CartItem) -> None:
        ...

    async def delete_lines(self, line_ids: list[int]) -> int:
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    async def add(self, order: Order) -> Order:
        ...

    async def get(self, order_id: int, store_id: int) -> Order | None:
        ...

    async def list_page(self, store_id: int, offset: int, limit: int) -> list[Order]:
        ...

    async def count(self, store_id: int) -> int:
        ...


@runtime_checkable
class IUserRepository(Protocol):
    async def get_by_id(self, user_id: int) -> UserDB | None:
        ...

    async def get_by_email(self, email: str) -> UserDB | None:
        ...


__all__ = [
    "IRoleResolver",
    "IStoreRepository",
    "IMembershipRepository",
    "ICategoryRepository",
    "IProductRepository",
    "ICartRepository",
    "IOrderRepository",
    "IUserRepository",
]
