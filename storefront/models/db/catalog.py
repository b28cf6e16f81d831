"""
Catalog models: categories and products
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, String, text

from .base import Base, SoftDeleteMixin, TimestampMixin


class Category(Base, TimestampMixin, SoftDeleteMixin):
    """Store-scoped product category (not linked to products)."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    name = Column(String(64), nullable=False)

    __table_args__ = (Index("idx_categories_store", store_id),)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"


class Product(Base, TimestampMixin, SoftDeleteMixin):
    """
    Sellable product.

    `stock` has no CHECK constraint: order placement decrements first and
    aborts when it observes a negative value.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    sku = Column(String(128), nullable=False)
    name = Column(String(64), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("idx_products_store", store_id),
        Index(
            "uq_products_store_sku_live",
            store_id,
            sku,
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, sku='{self.sku}', stock={self.stock})>"
