"""
Order management models
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .store import Store
    from .user import UserDB


class Order(Base, TimestampMixin):
    """Placed order. Immutable once committed."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)

    store: Mapped["Store"] = relationship("Store")
    user: Mapped["UserDB"] = relationship("UserDB")
    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        Index("idx_orders_store_created", store_id, "created_at"),
        Index("idx_orders_user", user_id),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, store_id={self.store_id}, total={self.total})>"


class OrderItem(Base):
    """
    Snapshot of a cart line at purchase time.

    Name, sku and price are copied from the product so later catalog edits
    never change historical orders.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)

    name = Column(String(64), nullable=False)
    sku = Column(String(128), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    line_total = Column(Numeric(12, 2), nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    __table_args__ = (Index("idx_order_items_order", order_id),)

    def __repr__(self):
        return f"<OrderItem(sku='{self.sku}', quantity={self.quantity}, price={self.price})>"
