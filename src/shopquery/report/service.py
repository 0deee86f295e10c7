from decimal import Decimal
from typing import List

from shopquery import query
from shopquery.customer import CustomerRepository
from shopquery.datasource import InMemoryDataSource
from shopquery.models import Customer, Order, Product
from shopquery.order import OrderRepository
from shopquery.order_detail import OrderDetailRepository
from shopquery.product import ProductRepository
from shopquery.report.rows import (
    CustomerOrderRow,
    CustomerSales,
    OrderLine,
    OrderProducts,
    OrderWithCustomer,
    ProductQuantity,
)


class ReportService:
    """
    Runs the filter, join and aggregation queries over the four repositories.

    Every query reads a fresh snapshot from the repositories, so results
    reflect any adds or removes made since the service was created.
    """

    def __init__(self, source: InMemoryDataSource):
        self.customers = CustomerRepository(source)
        self.orders = OrderRepository(source)
        self.products = ProductRepository(source)
        self.order_details = OrderDetailRepository(source)

    # Filters

    def customers_in_city(self, city: str) -> List[Customer]:
        return self.customers.find(lambda c: c.city == city)

    def orders_over(self, amount: Decimal) -> List[Order]:
        """Orders whose total is strictly greater than ``amount``."""
        return self.orders.find(lambda o: o.total_amount > amount)

    def affordable_products(self, max_price: Decimal, name_contains: str) -> List[Product]:
        """Products cheaper than ``max_price`` whose name contains the given text (case-sensitive)."""
        return self.products.find(lambda p: p.price < max_price and name_contains in p.name)

    # Joins

    def orders_with_customers(self) -> List[OrderWithCustomer]:
        return query.inner_join(
            self.orders.get_all(),
            self.customers.get_all(),
            lambda o: o.customer_id,
            lambda c: c.id,
            lambda o, c: OrderWithCustomer(
                order_id=o.id,
                customer_name=c.name,
                order_date=o.order_date,
                total_amount=o.total_amount,
            ),
        )

    def order_lines(self) -> List[OrderLine]:
        return query.inner_join(
            self.order_details.get_all(),
            self.products.get_all(),
            lambda od: od.product_id,
            lambda p: p.id,
            lambda od, p: OrderLine(
                order_id=od.order_id,
                product_name=p.name,
                price=p.price,
                quantity=od.quantity,
                line_total=od.quantity * p.price,
            ),
        )

    def customers_with_orders(self) -> List[CustomerOrderRow]:
        """
        Every customer with each of their orders.

        Customers without orders appear exactly once with ``order`` set to
        None; customers with orders appear once per order.
        """
        return query.left_join(
            self.customers.get_all(),
            self.orders.get_all(),
            lambda c: c.id,
            lambda o: o.customer_id,
            lambda c, o: CustomerOrderRow(customer=c, order=o),
        )

    # Aggregations

    def sales_by_customer(self) -> List[CustomerSales]:
        """
        Total and count of order amounts per customer, highest total first.

        Groups whose customer no longer exists are dropped by the join back
        to customers. Equal totals keep the order in which each customer's
        first order appears.
        """
        groups = query.group_by(self.orders.get_all(), lambda o: o.customer_id)
        totals = [
            (customer_id, sum((o.total_amount for o in orders), Decimal("0")), len(orders))
            for customer_id, orders in groups
        ]
        rows = query.inner_join(
            totals,
            self.customers.get_all(),
            lambda t: t[0],
            lambda c: c.id,
            lambda t, c: CustomerSales(
                customer_id=c.id,
                customer_name=c.name,
                total_sales=t[1],
                number_of_orders=t[2],
            ),
        )
        return query.order_by_desc(rows, lambda r: r.total_sales)

    def products_per_order(self) -> List[OrderProducts]:
        products = self.products.get_all()
        return [
            OrderProducts(
                order_id=order_id,
                products=query.inner_join(
                    details,
                    products,
                    lambda d: d.product_id,
                    lambda p: p.id,
                    lambda d, p: ProductQuantity(product_name=p.name, quantity=d.quantity),
                ),
            )
            for order_id, details in query.group_by(
                self.order_details.get_all(), lambda od: od.order_id
            )
        ]
