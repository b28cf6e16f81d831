"""
Base Value Object Classes

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override `_validate` to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Exact fixed-point amount.

    Floats are rejected outright: every amount must arrive as a Decimal,
    an int or a numeric string.

    Example:
        ```python
        price = Money(Decimal("9.99"))
        price.multiply(4)  # Money(amount=Decimal("39.96"))
        ```
    """

    amount: Decimal

    def _validate(self) -> None:
        if isinstance(self.amount, float):
            raise TypeError("Money does not accept float amounts")
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def add(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def multiply(self, quantity: int) -> "Money":
        """Multiply by an integer quantity; the result keeps the price's scale."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError("Quantity must be an integer")
        return Money(amount=self.amount * quantity)

    def __repr__(self) -> str:
        return f"Money(amount={self.amount})"

    @classmethod
    def zero(cls) -> "Money":
        return cls(amount=Decimal("0"))
