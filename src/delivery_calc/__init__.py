"""
Delivery Calculator Package

Computes an order's monetary breakdown (subtotal, discount, delivery fee,
tax, total) from unit price, quantity, discount percent and distance.
"""

__version__ = "1.0.0"
