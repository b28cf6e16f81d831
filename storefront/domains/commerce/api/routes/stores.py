"""
Store Routes
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import StoreRoleGuard, get_current_user
from storefront.domains.commerce.api.dependencies import get_store_service
from storefront.domains.commerce.api.schemas import StoreRequest, StoreResponse
from storefront.domains.commerce.application.use_cases import StoreService
from storefront.domains.commerce.domain.value_objects import ANY_MEMBER, STORE_OWNERS
from storefront.models.db import UserDB

router = APIRouter(prefix="/stores", tags=["Stores"])


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
async def create_store(
    payload: StoreRequest,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: StoreService = Depends(get_store_service),  # noqa: B008
):
    """Create a store; the caller becomes its OWNER."""
    return await service.create(user.id, payload.name)


@router.get("/{store_id}", response_model=StoreResponse, dependencies=[Depends(StoreRoleGuard(ANY_MEMBER))])
async def get_store(store_id: int, service: StoreService = Depends(get_store_service)):  # noqa: B008
    return await service.get(store_id)


@router.patch("/{store_id}", response_model=StoreResponse, dependencies=[Depends(StoreRoleGuard(STORE_OWNERS))])
async def update_store(
    store_id: int,
    payload: StoreRequest,
    service: StoreService = Depends(get_store_service),  # noqa: B008
):
    return await service.update(store_id, payload.name)


@router.delete("/{store_id}", response_model=StoreResponse, dependencies=[Depends(StoreRoleGuard(STORE_OWNERS))])
async def remove_store(store_id: int, service: StoreService = Depends(get_store_service)):  # noqa: B008
    """Soft-delete the store with its categories and products."""
    return await service.remove(store_id)
