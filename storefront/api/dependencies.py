"""
Shared FastAPI dependencies: database session, current user and the
store role guard.
"""

import logging
from collections.abc import Collection

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config.settings import get_settings
from storefront.core.domain import AuthenticationException
from storefront.database.async_db import get_async_db
from storefront.domains.commerce.application.authorization import StoreAccessGuard
from storefront.domains.commerce.domain.value_objects import Role
from storefront.domains.commerce.infrastructure.repositories import SQLAlchemyMembershipRepository
from storefront.models.db.user import UserDB
from storefront.repositories import UserRepository
from storefront.services.token_service import TokenService

logger = logging.getLogger(__name__)

_settings = get_settings()

token_service = TokenService(_settings)
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    return token_service


async def get_optional_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
) -> UserDB | None:
    """
    Resolve the caller from the session cookie, falling back to a Bearer token.

    Returns None when neither is present. A token that is present but
    invalid, expired, or names an unknown user is rejected.
    """
    token = request.cookies.get(_settings.SESSION_COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials
    if not token:
        return None

    user_id = token_service.get_user_id(token)
    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        raise AuthenticationException("Invalid or expired session")
    return user


async def get_current_user(
    user: UserDB | None = Depends(get_optional_current_user),  # noqa: B008
) -> UserDB:
    if user is None:
        raise AuthenticationException()
    return user


class StoreRoleGuard:
    """
    Route dependency declaring which store roles may call an operation.

    Usage:
        @router.post("/{store_id}/orders", dependencies=[Depends(StoreRoleGuard(ANY_MEMBER))])

    The store id is read from the `store_id` path parameter; routes without
    one pass unconditionally. An empty role set admits any authenticated user.
    """

    def __init__(self, roles: Collection[Role], operation: str | None = None):
        self.roles = frozenset(roles)
        self.operation = operation

    async def __call__(
        self,
        request: Request,
        user: UserDB | None = Depends(get_optional_current_user),  # noqa: B008
        db: AsyncSession = Depends(get_async_db),  # noqa: B008
    ) -> Role | None:
        raw_store_id = request.path_params.get("store_id")
        store_id = None
        if raw_store_id is not None:
            try:
                store_id = int(raw_store_id)
            except ValueError:
                # Path validation rejects it with 422 once dependencies have run
                return None

        guard = StoreAccessGuard(SQLAlchemyMembershipRepository(db))
        return await guard.authorize(
            user.id if user else None,
            store_id,
            self.roles,
            operation=self.operation or f"{request.method} {request.url.path}",
        )
