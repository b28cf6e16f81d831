"""
Commerce Repositories

SQLAlchemy implementations of the commerce ports.
"""

from .cart_repository import SQLAlchemyCartRepository
from .catalog_repository import SQLAlchemyCategoryRepository, SQLAlchemyProductRepository
from .order_repository import SQLAlchemyOrderRepository
from .store_repository import SQLAlchemyMembershipRepository, SQLAlchemyStoreRepository

__all__ = [
    "SQLAlchemyCartRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyMembershipRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyStoreRepository",
]
