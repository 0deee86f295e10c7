"""
In-memory data source.

Holds one list per entity, seeded with the fixed sample rows every time a
source is constructed. The source is owned by whoever creates it and is
handed to repositories by reference, so repositories built from the same
source share (and mutate) the same lists.

There is no locking: the lists are plain shared mutable state, which is only
safe because everything here runs on a single thread.
"""

from datetime import date
from decimal import Decimal

from shopquery.models import Customer, Order, OrderDetail, Product


def sample_customers() -> list[Customer]:
    return [
        Customer(id=1, name="Alice Smith", city="New York"),
        Customer(id=2, name="Bob Johnson", city="London"),
        Customer(id=3, name="Charlie Brown", city="New York"),
        Customer(id=4, name="Diana Miller", city="Paris"),
        Customer(id=5, name="Eve Davis", city="London"),
    ]


def sample_orders() -> list[Order]:
    return [
        Order(id=101, customer_id=1, order_date=date(2024, 1, 15), total_amount=Decimal("150.00")),
        Order(id=102, customer_id=2, order_date=date(2024, 1, 20), total_amount=Decimal("200.50")),
        Order(id=103, customer_id=1, order_date=date(2024, 2, 10), total_amount=Decimal("75.25")),
        Order(id=104, customer_id=3, order_date=date(2024, 2, 15), total_amount=Decimal("300.00")),
        Order(id=105, customer_id=4, order_date=date(2024, 3, 5), total_amount=Decimal("120.00")),
        Order(id=106, customer_id=2, order_date=date(2024, 3, 10), total_amount=Decimal("50.00")),
    ]


def sample_products() -> list[Product]:
    return [
        Product(id=1, name="Laptop", price=Decimal("1200.00")),
        Product(id=2, name="Mouse", price=Decimal("25.00")),
        Product(id=3, name="Keyboard", price=Decimal("75.00")),
        Product(id=4, name="Monitor", price=Decimal("300.00")),
        Product(id=5, name="Webcam", price=Decimal("50.00")),
    ]


def sample_order_details() -> list[OrderDetail]:
    return [
        OrderDetail(id=1, order_id=101, product_id=1, quantity=1),
        OrderDetail(id=2, order_id=101, product_id=2, quantity=2),
        OrderDetail(id=3, order_id=102, product_id=3, quantity=1),
        OrderDetail(id=4, order_id=102, product_id=4, quantity=1),
        OrderDetail(id=5, order_id=103, product_id=2, quantity=3),
        OrderDetail(id=6, order_id=104, product_id=1, quantity=1),
        OrderDetail(id=7, order_id=104, product_id=5, quantity=2),
        OrderDetail(id=8, order_id=105, product_id=3, quantity=1),
        OrderDetail(id=9, order_id=106, product_id=5, quantity=1),
    ]


class InMemoryDataSource:
    """One list per entity, seeded with sample rows unless told otherwise."""

    def __init__(self, seed: bool = True):
        self.customers: list[Customer] = sample_customers() if seed else []
        self.orders: list[Order] = sample_orders() if seed else []
        self.products: list[Product] = sample_products() if seed else []
        self.order_details: list[OrderDetail] = sample_order_details() if seed else []

    @classmethod
    def empty(cls) -> "InMemoryDataSource":
        return cls(seed=False)
