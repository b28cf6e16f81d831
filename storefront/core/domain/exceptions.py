"""
Domain Exceptions

These exceptions represent business rule violations and domain-specific errors.
They are translated to HTTP responses by the API layer exception handlers.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes exposed to API clients."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    EMPTY_CART = "EMPTY_CART"
    ALREADY_MEMBER = "ALREADY_MEMBER"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    CONFLICT = "CONFLICT"


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    code: ErrorCode = ErrorCode.VALIDATION
    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": True,
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code,
        }


class ValidationException(DomainException):
    """Raised when input passes schema validation but breaks a domain constraint."""

    code = ErrorCode.VALIDATION
    status_code = 422

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is missing, soft-deleted, or belongs to another store.

    The three cases share one message so callers cannot probe other stores.
    """

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message or f"{entity_type} not found",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class InsufficientStockException(DomainException):
    """Raised when there's not enough stock for an operation."""

    code = ErrorCode.INSUFFICIENT_STOCK
    status_code = 400

    def __init__(self, product_id: int, product_name: str, requested: int, available: int):
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Product {product_name} stock is not enough. Requested: {requested}, Available: {available}",
            {
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )


class EmptyCartException(DomainException):
    """Raised when an order is placed from an empty cart."""

    code = ErrorCode.EMPTY_CART
    status_code = 400

    def __init__(self, store_id: int):
        self.store_id = store_id
        super().__init__("Please add items to the cart before placing an order", {"store_id": store_id})


class AlreadyMemberException(DomainException):
    """Raised when inviting a user who already belongs to the store."""

    code = ErrorCode.ALREADY_MEMBER
    status_code = 400

    def __init__(self, email: str, store_id: int):
        self.email = email
        self.store_id = store_id
        super().__init__(f"User {email} is already a member of this store", {"store_id": store_id})


class AuthorizationException(DomainException):
    """Raised when a user is not authorized to perform an operation."""

    code = ErrorCode.FORBIDDEN
    status_code = 403

    def __init__(self, operation: str, resource: str | None = None, reason: str | None = None):
        self.operation = operation
        self.resource = resource
        msg = reason or "Forbidden access"
        details: dict[str, Any] = {"operation": operation}
        if resource:
            details["resource"] = resource
        super().__init__(msg, details)


class AuthenticationException(DomainException):
    """Raised when the caller is not authenticated or credentials are wrong."""

    code = ErrorCode.UNAUTHENTICATED
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class DuplicateEntityException(DomainException):
    """Raised when attempting to create a duplicate entity."""

    code = ErrorCode.CONFLICT
    status_code = 409

    def __init__(self, entity_type: str, field: str, value: Any):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field} '{value}' already exists",
            {
                "entity_type": entity_type,
                "field": field,
                "value": str(value),
            },
        )
