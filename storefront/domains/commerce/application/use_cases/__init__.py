"""
Commerce Use Cases
"""

from .cart import CartService
from .catalog import CategoryService, ProductService
from .get_orders import GetOrdersUseCase, GetOrderUseCase
from .memberships import MembershipService
from .place_order import PlaceOrderRequest, PlaceOrderUseCase
from .stores import StoreService

__all__ = [
    "CartService",
    "CategoryService",
    "GetOrderUseCase",
    "GetOrdersUseCase",
    "MembershipService",
    "PlaceOrderRequest",
    "PlaceOrderUseCase",
    "ProductService",
    "StoreService",
]
