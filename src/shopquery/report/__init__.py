"""
Report

Filter, join and aggregation queries over the sample collections.
"""

from shopquery.report.rows import (
    CustomerOrderRow,
    CustomerSales,
    OrderLine,
    OrderProducts,
    OrderWithCustomer,
    ProductQuantity,
)
from shopquery.report.service import ReportService

__all__ = [
    "CustomerOrderRow",
    "CustomerSales",
    "OrderLine",
    "OrderProducts",
    "OrderWithCustomer",
    "ProductQuantity",
    "ReportService",
]
