"""
Pricing Calculator - Core order breakdown logic with traceability.

Resolution order:
1. Subtotal = unit price × quantity
2. Discount = subtotal × discount percent
3. Free delivery when the discounted subtotal exceeds the threshold
4. Delivery fee = distance × rate per km, unless waived
5. Tax on the discounted subtotal only (never on the delivery fee)
6. Total = discounted subtotal + delivery fee + tax
"""
import logging
from typing import Optional

from ..config.settings import get_settings, Settings
from .models import OrderInput, OrderBreakdown, TraceStep

logger = logging.getLogger(__name__)


class PricingCalculator:
    """Computes order breakdowns using the configured pricing constants."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def compute_breakdown(self, order: OrderInput) -> OrderBreakdown:
        """
        Calculate the monetary breakdown for an order.

        Args:
            order: OrderInput with the four form values

        Returns:
            Immutable OrderBreakdown
        """
        breakdown, _ = self.compute_breakdown_with_trace(order)
        return breakdown

    def compute_breakdown_with_trace(self, order: OrderInput) -> tuple[OrderBreakdown, list[TraceStep]]:
        """
        Calculate the breakdown with a trace of each calculation step.

        Returns (breakdown, trace_steps).
        """
        s = self.settings
        trace = []

        subtotal = order.unit_price * order.quantity
        trace.append(TraceStep("Subtotal", f"{order.quantity} × {order.unit_price:.2f}", f"{subtotal:.2f}"))

        discount_amount = subtotal * (order.discount_percent / 100)
        discounted_subtotal = subtotal - discount_amount
        trace.append(TraceStep("Discount", f"{order.discount_percent}% of subtotal", f"{discount_amount:.2f}"))

        free_delivery = discounted_subtotal > s.free_delivery_threshold
        if free_delivery:
            delivery_fee = 0.0
            trace.append(TraceStep(
                "Delivery",
                f"Discounted subtotal above {s.free_delivery_threshold:.2f}, delivery waived",
                f"{delivery_fee:.2f}",
            ))
        else:
            delivery_fee = order.distance_km * s.delivery_rate_per_km
            trace.append(TraceStep(
                "Delivery",
                f"{order.distance_km} km × {s.delivery_rate_per_km:.2f}",
                f"{delivery_fee:.2f}",
            ))

        tax_amount = discounted_subtotal * s.tax_rate
        trace.append(TraceStep("Tax", f"{s.tax_percent:g}% of discounted subtotal", f"{tax_amount:.2f}"))

        total = subtotal - discount_amount + delivery_fee + tax_amount
        trace.append(TraceStep("Total", "Discounted subtotal + delivery + tax", f"{total:.2f}"))

        breakdown = OrderBreakdown(
            subtotal=subtotal,
            discount_percent=order.discount_percent,
            discount_amount=discount_amount,
            discounted_subtotal=discounted_subtotal,
            tax_amount=tax_amount,
            delivery_fee=delivery_fee,
            free_delivery_applied=free_delivery,
            total=total,
        )
        logger.debug("Computed breakdown %s for %s", breakdown, order)
        return breakdown, trace


def compute_breakdown(order: OrderInput, settings: Optional[Settings] = None) -> OrderBreakdown:
    """Calculate a breakdown with the default (or given) settings."""
    return PricingCalculator(settings).compute_breakdown(order)
