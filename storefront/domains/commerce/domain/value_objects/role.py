"""
Store Role Value Object

Roles a user can hold inside a single store, plus the role sets that
routed operations declare.
"""

from enum import Enum


class Role(str, Enum):
    """Membership role inside one store."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    CASHIER = "CASHIER"

    @property
    def can_manage_members(self) -> bool:
        return self in (Role.OWNER, Role.ADMIN)


ANY_MEMBER: frozenset[Role] = frozenset({Role.OWNER, Role.ADMIN, Role.CASHIER})
STORE_MANAGERS: frozenset[Role] = frozenset({Role.OWNER, Role.ADMIN})
STORE_OWNERS: frozenset[Role] = frozenset({Role.OWNER})
