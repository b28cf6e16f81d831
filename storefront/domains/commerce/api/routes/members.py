"""
Store Membership Routes
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import StoreRoleGuard, get_current_user
from storefront.domains.commerce.api.dependencies import get_membership_service
from storefront.domains.commerce.api.schemas import (
    MembershipCreateRequest,
    MembershipResponse,
    MembershipUpdateRequest,
)
from storefront.domains.commerce.application.use_cases import MembershipService
from storefront.domains.commerce.domain.value_objects import STORE_MANAGERS
from storefront.models.db import UserDB

router = APIRouter(
    prefix="/stores/{store_id}/members",
    tags=["Store Members"],
    dependencies=[Depends(StoreRoleGuard(STORE_MANAGERS))],
)


@router.post("", response_model=MembershipResponse, status_code=status.HTTP_201_CREATED)
async def add_member(
    store_id: int,
    payload: MembershipCreateRequest,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: MembershipService = Depends(get_membership_service),  # noqa: B008
):
    """Invite a registered user to the store."""
    return await service.create(user.id, store_id, payload.email, payload.role)


@router.patch("/{membership_id}", response_model=MembershipResponse)
async def update_member(
    store_id: int,
    membership_id: int,
    payload: MembershipUpdateRequest,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: MembershipService = Depends(get_membership_service),  # noqa: B008
):
    return await service.update(user.id, store_id, membership_id, payload.role)


@router.delete("/{membership_id}", response_model=MembershipResponse)
async def remove_member(
    store_id: int,
    membership_id: int,
    user: UserDB = Depends(get_current_user),  # noqa: B008
    service: MembershipService = Depends(get_membership_service),  # noqa: B008
):
    return await service.remove(user.id, store_id, membership_id)
