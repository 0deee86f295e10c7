from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from shopquery.models import Customer, Order


@dataclass
class OrderWithCustomer:
    order_id: int
    customer_name: str
    order_date: date
    total_amount: Decimal


@dataclass
class OrderLine:
    order_id: int
    product_name: str
    price: Decimal
    quantity: int
    line_total: Decimal


@dataclass
class CustomerOrderRow:
    """A customer paired with one of their orders, or with no order at all."""

    customer: Customer
    order: Optional[Order] = None

    @property
    def has_order(self) -> bool:
        return self.order is not None

    @property
    def order_id(self) -> Optional[int]:
        return self.order.id if self.order is not None else None

    @property
    def order_total(self) -> Optional[Decimal]:
        return self.order.total_amount if self.order is not None else None


@dataclass
class CustomerSales:
    customer_id: int
    customer_name: str
    total_sales: Decimal
    number_of_orders: int


@dataclass
class ProductQuantity:
    product_name: str
    quantity: int


@dataclass
class OrderProducts:
    order_id: int
    products: List[ProductQuantity] = field(default_factory=list)
