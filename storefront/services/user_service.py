"""
Local-credential account service: registration and login
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import AuthenticationException, DuplicateEntityException
from storefront.database import atomic
from storefront.models.db.user import UserDB
from storefront.repositories import UserRepository
from storefront.services.token_service import TokenService

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession, token_service: TokenService):
        self.session = session
        self.users = UserRepository(session)
        self.token_service = token_service

    async def register(self, name: str, email: str, password: str) -> UserDB:
        """
        Create an account.

        Raises:
            DuplicateEntityException: the email is already registered
        """
        async with atomic(self.session):
            if await self.users.get_by_email(email):
                raise DuplicateEntityException("User", "email", email)
            password_hash = self.token_service.get_password_hash(password)
            return await self.users.create(name=name, email=email, password_hash=password_hash)

    async def authenticate(self, email: str, password: str) -> tuple[UserDB, str]:
        """
        Verify credentials and issue a session token.

        Unknown email and wrong password fail the same way.
        """
        user = await self.users.get_by_email(email)
        if user is None or not self.token_service.verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationException("Invalid email or password")

        token = self.token_service.create_access_token({"sub": str(user.id)})
        logger.info(f"User {user.id} logged in")
        return user, token
