"""
Customer

This package provides data access for customers.
"""

from shopquery.customer.repository import CustomerRepository

__all__ = ["CustomerRepository"]
