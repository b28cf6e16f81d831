"""
Domain Layer - Core building blocks

- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from storefront.core.domain.exceptions import (
    AlreadyMemberException,
    AuthenticationException,
    AuthorizationException,
    DomainException,
    DuplicateEntityException,
    EmptyCartException,
    EntityNotFoundException,
    ErrorCode,
    InsufficientStockException,
    ValidationException,
)
from storefront.core.domain.value_objects import Money, ValueObject

__all__ = [
    # Value Objects
    "ValueObject",
    "Money",
    # Exceptions
    "ErrorCode",
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "InsufficientStockException",
    "EmptyCartException",
    "AlreadyMemberException",
    "AuthorizationException",
    "AuthenticationException",
    "DuplicateEntityException",
]
