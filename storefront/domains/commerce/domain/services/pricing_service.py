"""
Pricing Service for the Commerce Domain

Exact decimal arithmetic for cart lines and order totals. No float ever
enters these computations.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from storefront.core.domain import Money


@dataclass(frozen=True)
class PricedLine:
    """A unit price with a quantity and the resulting line total."""

    unit_price: Decimal
    quantity: int
    line_total: Decimal


class PricingService:
    """Stateless pricing rules."""

    @staticmethod
    def line_total(unit_price: Decimal, quantity: int) -> Decimal:
        """Return `unit_price * quantity` at the price's own precision."""
        if quantity <= 0:
            raise ValueError("Quantity must be positive")
        return Money(unit_price).multiply(quantity).amount

    @classmethod
    def price_line(cls, unit_price: Decimal, quantity: int) -> PricedLine:
        return PricedLine(
            unit_price=Money(unit_price).amount,
            quantity=quantity,
            line_total=cls.line_total(unit_price, quantity),
        )

    @staticmethod
    def order_total(line_totals: Iterable[Decimal]) -> Decimal:
        """Sum of line totals; an empty iterable sums to zero."""
        total = Money.zero()
        for amount in line_totals:
            total = total.add(Money(amount))
        return total.amount
