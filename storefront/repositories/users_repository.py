"""
Repository for user accounts
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.db.user import UserDB

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Async CRUD for `users`.

    Attributes:
        session: SQLAlchemy async session
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> UserDB | None:
        return await self.session.get(UserDB, user_id)

    async def get_by_email(self, email: str) -> UserDB | None:
        """Case-insensitive lookup by email."""
        result = await self.session.execute(select(UserDB).where(func.lower(UserDB.email) == email.lower()))
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str, password_hash: str) -> UserDB:
        user = UserDB(name=name, email=email.lower(), password_hash=password_hash)
        self.session.add(user)
        await self.session.flush()
        logger.info(f"User created: {user.id}")
        return user
