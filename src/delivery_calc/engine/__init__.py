"""Engine subpackage - core pricing logic and input models."""
from .pricing_engine import PricingCalculator, compute_breakdown
from .models import OrderInput, OrderBreakdown, TraceStep

__all__ = ['PricingCalculator', 'compute_breakdown', 'OrderInput', 'OrderBreakdown', 'TraceStep']
