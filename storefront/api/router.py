from fastapi import APIRouter

from storefront.api.routes import auth
from storefront.domains.commerce.api.routes import router as commerce_router

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(commerce_router)
