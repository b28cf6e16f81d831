"""
Store and Membership Repository Implementations

SQLAlchemy implementations of IStoreRepository and IMembershipRepository.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from storefront.domains.commerce.application.ports import IMembershipRepository, IStoreRepository
from storefront.domains.commerce.domain.value_objects import Role
from storefront.models.db import CartItem, Category, Product, Store, UserStore

logger = logging.getLogger(__name__)


class SQLAlchemyStoreRepository(IStoreRepository):
    """Store persistence. Writes are flushed, never committed."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, store_id: int) -> Store | None:
        result = await self.session.execute(select(Store).where(Store.id == store_id))
        return result.scalar_one_or_none()

    async def add(self, store: Store) -> Store:
        self.session.add(store)
        await self.session.flush()
        return store

    async def soft_delete_cascade(self, store_id: int) -> None:
        """
        Flag the store, its categories and its products as deleted and
        delete the store's cart lines, all in the caller's transaction.
        """
        for model, column in (
            (Category, Category.store_id),
            (Product, Product.store_id),
            (Store, Store.id),
        ):
            await self.session.execute(
                update(model)
                .where(column == store_id, model.is_deleted.is_(False))
                .values(is_deleted=True)
                .execution_options(synchronize_session=False)
            )
        await self.session.execute(
            delete(CartItem).where(CartItem.store_id == store_id).execution_options(synchronize_session=False)
        )
        logger.info(f"Soft-deleted store {store_id} with its categories and products")


class SQLAlchemyMembershipRepository(IMembershipRepository):
    """Membership persistence and role resolution."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_role(self, user_id: int, store_id: int) -> Role | None:
        """Role of the user in a live store, or None when there is no membership."""
        result = await self.session.execute(
            select(UserStore.role)
            .join(Store, Store.id == UserStore.store_id)
            .where(
                UserStore.user_id == user_id,
                UserStore.store_id == store_id,
                Store.is_deleted.is_(False),
            )
        )
        role = result.scalar_one_or_none()
        return Role(role) if role is not None else None

    async def get(self, membership_id: int, store_id: int) -> UserStore | None:
        result = await self.session.execute(
            select(UserStore)
            .options(joinedload(UserStore.user))
            .where(UserStore.id == membership_id, UserStore.store_id == store_id)
        )
        return result.scalar_one_or_none()

    async def get_for_user(self, user_id: int, store_id: int) -> UserStore | None:
        result = await self.session.execute(
            select(UserStore).where(UserStore.user_id == user_id, UserStore.store_id == store_id)
        )
        return result.scalar_one_or_none()

    async def add(self, membership: UserStore) -> UserStore:
        self.session.add(membership)
        await self.session.flush()
        return membership

    async def delete(self, membership: UserStore) -> None:
        await self.session.delete(membership)
        await self.session.flush()
