"""
Commerce Value Objects
"""

from .role import ANY_MEMBER, STORE_MANAGERS, STORE_OWNERS, Role

__all__ = [
    "Role",
    "ANY_MEMBER",
    "STORE_MANAGERS",
    "STORE_OWNERS",
]
