"""
Commerce Views

Plain result objects returned by the use cases and serialized by the API layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.models.db import CartItem, Order, OrderItem, Product, UserDB, UserStore


@dataclass
class CartLineView:
    """A cart line decorated with the product's current name, sku and price."""

    id: int
    store_id: int
    product_id: int
    name: str
    sku: str
    price: Decimal
    quantity: int
    line_total: Decimal

    @classmethod
    def build(cls, line: "CartItem", product: "Product", line_total: Decimal) -> "CartLineView":
        return cls(
            id=line.id,
            store_id=line.store_id,
            product_id=product.id,
            name=product.name,
            sku=product.sku,
            price=product.price,
            quantity=line.quantity,
            line_total=line_total,
        )


@dataclass
class OrderItemView:
    id: int
    product_id: int | None
    name: str
    sku: str
    price: Decimal
    quantity: int
    line_total: Decimal

    @classmethod
    def from_model(cls, item: "OrderItem") -> "OrderItemView":
        return cls(
            id=item.id,
            product_id=item.product_id,
            name=item.name,
            sku=item.sku,
            price=item.price,
            quantity=item.quantity,
            line_total=item.line_total,
        )


@dataclass
class OrderView:
    id: int
    store_id: int
    store_name: str
    purchaser_name: str
    created_at: datetime
    total: Decimal
    items: list[OrderItemView] = field(default_factory=list)

    @classmethod
    def from_model(cls, order: "Order", store_name: str, purchaser_name: str) -> "OrderView":
        return cls(
            id=order.id,
            store_id=order.store_id,
            store_name=store_name,
            purchaser_name=purchaser_name,
            created_at=order.created_at,
            total=order.total,
            items=[OrderItemView.from_model(item) for item in order.items],
        )


@dataclass
class PagingView:
    current_page: int
    size: int
    total_page: int


@dataclass
class OrderPage:
    orders: list[OrderView]
    paging: PagingView


@dataclass
class MembershipView:
    id: int
    store_id: int
    user_id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_model(cls, membership: "UserStore", user: "UserDB") -> "MembershipView":
        return cls(
            id=membership.id,
            store_id=membership.store_id,
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=membership.role,
        )
