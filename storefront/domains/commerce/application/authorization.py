"""
Store Access Guard

Single decision point for role-gated, store-scoped operations.
"""

import logging
from collections.abc import Collection

from storefront.core.domain import AuthenticationException, AuthorizationException
from storefront.domains.commerce.application.ports import IRoleResolver
from storefront.domains.commerce.domain.value_objects import Role

logger = logging.getLogger(__name__)


class StoreAccessGuard:
    """
    Allows or denies an operation for a caller against a store.

    Rules, in order:
    - no store in the addressed path: allowed (store-less operations are not role-gated)
    - no authenticated caller: UNAUTHENTICATED
    - empty required set: any authenticated caller is allowed
    - role absent or outside the required set: FORBIDDEN
    """

    def __init__(self, role_resolver: IRoleResolver):
        self.role_resolver = role_resolver

    async def authorize(
        self,
        user_id: int | None,
        store_id: int | None,
        required: Collection[Role],
        operation: str = "store operation",
    ) -> Role | None:
        """
        Check access and return the caller's role in the store (None if not resolved).

        Raises:
            AuthenticationException: caller is anonymous on a store-scoped path
            AuthorizationException: caller lacks one of the required roles
        """
        if store_id is None:
            return None

        if user_id is None:
            raise AuthenticationException()

        role = await self.role_resolver.get_role(user_id, store_id)
        if required and (role is None or role not in required):
            logger.warning(
                "Denied %s on store %s for user %s (role=%s)",
                operation,
                store_id,
                user_id,
                role.value if role else None,
            )
            raise AuthorizationException(operation, resource=f"store:{store_id}")

        return role
