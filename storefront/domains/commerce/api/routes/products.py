"""
Product Routes
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import StoreRoleGuard
from storefront.domains.commerce.api.dependencies import get_product_service
from storefront.domains.commerce.api.schemas import ProductCreateRequest, ProductResponse, ProductUpdateRequest
from storefront.domains.commerce.application.use_cases import ProductService
from storefront.domains.commerce.domain.value_objects import ANY_MEMBER, STORE_MANAGERS

router = APIRouter(prefix="/stores/{store_id}/products", tags=["Products"])

managers_only = [Depends(StoreRoleGuard(STORE_MANAGERS))]


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED, dependencies=managers_only)
async def create_product(
    store_id: int,
    payload: ProductCreateRequest,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.create(store_id, payload.name, payload.sku, payload.price, payload.stock)


@router.get("/sku/{sku}", response_model=ProductResponse, dependencies=[Depends(StoreRoleGuard(ANY_MEMBER))])
async def get_product_by_sku(
    store_id: int,
    sku: str,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.get_by_sku(sku, store_id)


@router.patch("/{product_id}", response_model=ProductResponse, dependencies=managers_only)
async def update_product(
    store_id: int,
    product_id: int,
    payload: ProductUpdateRequest,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.update(product_id, store_id, payload.model_dump(exclude_unset=True))


@router.delete("/{product_id}", response_model=ProductResponse, dependencies=managers_only)
async def remove_product(
    store_id: int,
    product_id: int,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.remove(product_id, store_id)
