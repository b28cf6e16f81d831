"""
Store Service
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import EntityNotFoundException
from storefront.database import atomic
from storefront.domains.commerce.application.ports import IMembershipRepository, IStoreRepository
from storefront.domains.commerce.domain.value_objects import Role
from storefront.models.db import Store, UserStore

logger = logging.getLogger(__name__)


class StoreService:
    def __init__(
        self,
        session: AsyncSession,
        store_repository: IStoreRepository,
        membership_repository: IMembershipRepository,
    ):
        self.session = session
        self.store_repository = store_repository
        self.membership_repository = membership_repository

    async def create(self, user_id: int, name: str) -> Store:
        """Create a store and make its creator the OWNER, in one transaction."""
        async with atomic(self.session):
            store = await self.store_repository.add(Store(name=name, user_id=user_id))
            await self.membership_repository.add(
                UserStore(user_id=user_id, store_id=store.id, role=Role.OWNER.value)
            )
        logger.info(f"Store {store.id} created by user {user_id}")
        return store

    async def get(self, store_id: int) -> Store:
        store = await self.store_repository.get(store_id)
        if store is None:
            raise EntityNotFoundException("Store", store_id)
        return store

    async def update(self, store_id: int, name: str) -> Store:
        async with atomic(self.session):
            store = await self.get(store_id)
            store.name = name
            await self.session.flush()
        return store

    async def remove(self, store_id: int) -> Store:
        """Soft-delete the store together with its categories and products."""
        async with atomic(self.session):
            store = await self.get(store_id)
            await self.store_repository.soft_delete_cascade(store_id)
        logger.info(f"Store {store_id} removed")
        return store
