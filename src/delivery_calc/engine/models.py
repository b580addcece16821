"""
Data models for the delivery calculator.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, asdict
from typing import Mapping, Optional

from .inputs import coerce_decimal, coerce_count


@dataclass
class TraceStep:
    """A single step in the breakdown trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class OrderInput:
    """The four values collected by the order form."""
    unit_price: float = 0.0
    quantity: int = 0
    discount_percent: float = 0.0
    distance_km: float = 0.0

    @classmethod
    def from_raw(cls, values: Mapping, strict: bool = False) -> 'OrderInput':
        """
        Build an input from raw form values.

        Missing, empty or non-numeric values become 0. With ``strict=True``
        a present but non-numeric value raises InvalidInputError instead.
        Quantity is a count: fractional values are truncated.
        """
        values = values or {}
        return cls(
            unit_price=coerce_decimal('unit_price', values.get('unit_price'), strict),
            quantity=coerce_count('quantity', values.get('quantity'), strict),
            discount_percent=coerce_decimal('discount_percent', values.get('discount_percent'), strict),
            distance_km=coerce_decimal('distance_km', values.get('distance_km'), strict),
        )


@dataclass(frozen=True)
class OrderBreakdown:
    """Complete result of a pricing calculation."""
    subtotal: float
    discount_percent: float
    discount_amount: float
    discounted_subtotal: float
    tax_amount: float
    delivery_fee: float
    free_delivery_applied: bool
    total: float

    def to_dict(self) -> dict:
        """Convert to a plain dict for JSON responses and exports."""
        return asdict(self)
