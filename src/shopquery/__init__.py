"""
shopquery

In-memory repositories and join/group queries over a small sample shop.
"""

from shopquery.datasource import InMemoryDataSource
from shopquery.models import Customer, Order, OrderDetail, Product
from shopquery.repository import BaseRepository

__all__ = [
    "BaseRepository",
    "Customer",
    "InMemoryDataSource",
    "Order",
    "OrderDetail",
    "Product",
]
