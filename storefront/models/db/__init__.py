"""
Database models package - Organized by responsibility
"""

from .base import Base, SoftDeleteMixin, TimestampMixin
from .cart import CartItem
from .catalog import Category, Product
from .orders import Order, OrderItem
from .store import Store, UserStore
from .user import UserDB

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
    # Accounts
    "UserDB",
    # Tenancy
    "Store",
    "UserStore",
    # Catalog
    "Category",
    "Product",
    # Cart / orders
    "CartItem",
    "Order",
    "OrderItem",
]
