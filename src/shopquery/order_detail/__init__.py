"""
Order detail

This package provides data access for order line items.
"""

from shopquery.order_detail.repository import OrderDetailRepository

__all__ = ["OrderDetailRepository"]
