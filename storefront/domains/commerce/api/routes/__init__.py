"""
Commerce API Routers
"""

from fastapi import APIRouter

from . import carts, categories, members, orders, products, stores

router = APIRouter()
router.include_router(stores.router)
router.include_router(members.router)
router.include_router(categories.router)
router.include_router(products.router)
router.include_router(carts.router)
router.include_router(orders.router)

__all__ = ["router"]
