"""
Cart line model
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, UniqueConstraint

from .base import Base, TimestampMixin


class CartItem(Base, TimestampMixin):
    """Pending quantity of one product for one user in one store."""

    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "store_id", "product_id", name="uq_cart_user_store_product"),
        CheckConstraint("quantity > 0", name="ck_cart_quantity_positive"),
        Index("idx_carts_user_store", user_id, store_id),
    )

    def __repr__(self):
        return f"<CartItem(product_id={self.product_id}, quantity={self.quantity})>"
