"""
Order Routes
"""

from fastapi import APIRouter, Depends, Query, status

from storefront.api.dependencies import StoreRoleGuard, get_current_user
from storefront.domains.commerce.api.dependencies import (
    get_order_use_case,
    get_orders_use_case,
    get_place_order_use_case,
)
from storefront.domains.commerce.api.schemas import OrderListResponse, OrderResponse
from storefront.domains.commerce.application.use_cases import (
    GetOrdersUseCase,
    GetOrderUseCase,
    PlaceOrderRequest,
    PlaceOrderUseCase,
)
from storefront.domains.commerce.domain.value_objects import ANY_MEMBER
from storefront.models.db import UserDB

router = APIRouter(
    prefix="/stores/{store_id}/orders",
    tags=["Orders"],
    dependencies=[Depends(StoreRoleGuard(ANY_MEMBER))],
)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    store_id: int,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    use_case: PlaceOrderUseCase = Depends(get_place_order_use_case),  # noqa: B008
):
    """Place an order from the caller's cart in this store."""
    return await use_case.execute(PlaceOrderRequest(store_id=store_id, user_id=user.id, purchaser_name=user.name))


@router.get("", response_model=OrderListResponse)
async def list_orders(
    store_id: int,
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    use_case: GetOrdersUseCase = Depends(get_orders_use_case),  # noqa: B008
):
    return await use_case.execute(store_id, page=page, size=size)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    store_id: int,
    order_id: int,
    use_case: GetOrderUseCase = Depends(get_order_use_case),  # noqa: B008
):
    return await use_case.execute(order_id, store_id)
