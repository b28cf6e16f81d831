"""
Membership Service

Invites, role changes and removals inside one store. These rules apply on
top of the route-level role check:

- only OWNER and ADMIN may change memberships
- nobody can grant OWNER through this path
- an ADMIN cannot touch an OWNER's membership
- nobody can change or remove their own OWNER membership
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import AlreadyMemberException, AuthorizationException, EntityNotFoundException
from storefront.database import atomic
from storefront.domains.commerce.application.dto import MembershipView
from storefront.domains.commerce.application.ports import IMembershipRepository, IUserRepository
from storefront.domains.commerce.domain.value_objects import Role
from storefront.models.db import UserStore

logger = logging.getLogger(__name__)


class MembershipService:
    def __init__(
        self,
        session: AsyncSession,
        membership_repository: IMembershipRepository,
        user_repository: IUserRepository,
    ):
        self.session = session
        self.membership_repository = membership_repository
        self.user_repository = user_repository

    def _deny(self, operation: str, actor_id: int, store_id: int, reason: str) -> AuthorizationException:
        logger.warning(f"Membership {operation} denied for user {actor_id} in store {store_id}: {reason}")
        return AuthorizationException(f"membership.{operation}", resource=f"store:{store_id}")

    async def _actor_role(self, operation: str, actor_id: int, store_id: int) -> Role:
        role = await self.membership_repository.get_role(actor_id, store_id)
        if role is None or not role.can_manage_members:
            raise self._deny(operation, actor_id, store_id, f"role {role.value if role else None}")
        return role

    def _check_target(self, operation: str, actor_id: int, actor_role: Role, membership: UserStore) -> None:
        target_role = Role(membership.role)
        if target_role is Role.OWNER and membership.user_id == actor_id:
            raise self._deny(operation, actor_id, membership.store_id, "own OWNER membership")
        if target_role is Role.OWNER and actor_role is not Role.OWNER:
            raise self._deny(operation, actor_id, membership.store_id, "ADMIN cannot modify an OWNER")

    async def _load(self, membership_id: int, store_id: int) -> UserStore:
        membership = await self.membership_repository.get(membership_id, store_id)
        if membership is None:
            raise EntityNotFoundException("Membership", membership_id)
        return membership

    async def create(self, actor_id: int, store_id: int, email: str, role: Role) -> MembershipView:
        """
        Add the user registered under `email` to the store.

        Raises:
            AuthorizationException: actor cannot manage members, or role is OWNER
            EntityNotFoundException: no user with that email
            AlreadyMemberException: the user already belongs to the store
        """
        async with atomic(self.session):
            await self._actor_role("create", actor_id, store_id)
            if role is Role.OWNER:
                raise self._deny("create", actor_id, store_id, "cannot grant OWNER")

            user = await self.user_repository.get_by_email(email)
            if user is None:
                raise EntityNotFoundException("User", email)

            if await self.membership_repository.get_for_user(user.id, store_id):
                raise AlreadyMemberException(email, store_id)

            membership = await self.membership_repository.add(
                UserStore(user_id=user.id, store_id=store_id, role=role.value)
            )

        logger.info(f"User {user.id} joined store {store_id} as {role.value}")
        return MembershipView.from_model(membership, user)

    async def update(self, actor_id: int, store_id: int, membership_id: int, role: Role) -> MembershipView:
        async with atomic(self.session):
            actor_role = await self._actor_role("update", actor_id, store_id)
            membership = await self._load(membership_id, store_id)
            self._check_target("update", actor_id, actor_role, membership)
            if role is Role.OWNER:
                raise self._deny("update", actor_id, store_id, "cannot grant OWNER")

            membership.role = role.value
            await self.session.flush()

        logger.info(f"Membership {membership_id} in store {store_id} changed to {role.value}")
        return MembershipView.from_model(membership, membership.user)

    async def remove(self, actor_id: int, store_id: int, membership_id: int) -> MembershipView:
        async with atomic(self.session):
            actor_role = await self._actor_role("remove", actor_id, store_id)
            membership = await self._load(membership_id, store_id)
            self._check_target("remove", actor_id, actor_role, membership)

            view = MembershipView.from_model(membership, membership.user)
            await self.membership_repository.delete(membership)

        logger.info(f"Membership {membership_id} removed from store {store_id}")
        return view
