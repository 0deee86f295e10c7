"""
Order

This package provides data access for customer orders.
"""

from shopquery.order.repository import OrderRepository

__all__ = ["OrderRepository"]
