"""
Product

This package provides data access for products.
"""

from shopquery.product.repository import ProductRepository

__all__ = ["ProductRepository"]
