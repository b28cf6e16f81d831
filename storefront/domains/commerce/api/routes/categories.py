"""
Category Routes
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import StoreRoleGuard
from storefront.domains.commerce.api.dependencies import get_category_service
from storefront.domains.commerce.api.schemas import CategoryRequest, CategoryResponse
from storefront.domains.commerce.application.use_cases import CategoryService
from storefront.domains.commerce.domain.value_objects import ANY_MEMBER, STORE_MANAGERS

router = APIRouter(prefix="/stores/{store_id}/categories", tags=["Categories"])

managers_only = [Depends(StoreRoleGuard(STORE_MANAGERS))]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED, dependencies=managers_only)
async def create_category(
    store_id: int,
    payload: CategoryRequest,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.create(store_id, payload.name)


@router.get("", response_model=list[CategoryResponse], dependencies=[Depends(StoreRoleGuard(ANY_MEMBER))])
async def list_categories(store_id: int, service: CategoryService = Depends(get_category_service)):  # noqa: B008
    return await service.list_for_store(store_id)


@router.patch("/{category_id}", response_model=CategoryResponse, dependencies=managers_only)
async def update_category(
    store_id: int,
    category_id: int,
    payload: CategoryRequest,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.update(category_id, store_id, payload.name)


@router.delete("/{category_id}", response_model=CategoryResponse, dependencies=managers_only)
async def remove_category(
    store_id: int,
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.remove(category_id, store_id)
