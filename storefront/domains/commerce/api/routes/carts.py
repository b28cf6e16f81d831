"""
Cart Routes

Every operation acts on the caller's own cart in the addressed store.
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import StoreRoleGuard, get_current_user
from storefront.domains.commerce.api.dependencies import get_cart_service
from storefront.domains.commerce.api.schemas import CartAddRequest, CartLineResponse, CartUpdateRequest
from storefront.domains.commerce.application.use_cases import CartService
from storefront.domains.commerce.domain.value_objects import ANY_MEMBER
from storefront.models.db import UserDB

router = APIRouter(
    prefix="/stores/{store_id}/carts",
    tags=["Cart"],
    dependencies=[Depends(StoreRoleGuard(ANY_MEMBER))],
)


@router.post("", response_model=CartLineResponse, status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    store_id: int,
    payload: CartAddRequest,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: CartService = Depends(get_cart_service),  # noqa: B008
):
    """Add a product; repeated adds merge into one line."""
    return await service.add(store_id, user.id, payload.product_id, payload.quantity)


@router.get("", response_model=list[CartLineResponse])
async def list_cart(
    store_id: int,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: CartService = Depends(get_cart_service),  # noqa: B008
):
    return await service.list_lines(store_id, user.id)


@router.patch("/{line_id}", response_model=CartLineResponse)
async def update_cart_line(
    store_id: int,
    line_id: int,
    payload: CartUpdateRequest,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: CartService = Depends(get_cart_service),  # noqa: B008
):
    return await service.update(line_id, store_id, user.id, payload.quantity)


@router.delete("/{line_id}", response_model=CartLineResponse)
async def remove_cart_line(
    store_id: int,
    line_id: int,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: CartService = Depends(get_cart_service),  # noqa: B008
):
    return await service.remove(line_id, store_id, user.id)
