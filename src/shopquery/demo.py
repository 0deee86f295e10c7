#!/usr/bin/env python3
"""Console walkthrough of the repositories and report queries."""

import logging
from decimal import Decimal
from typing import Optional

from rich.console import Console

from shopquery.config import config
from shopquery.datasource import InMemoryDataSource
from shopquery.logging_setup import setup_logging
from shopquery.models import Customer
from shopquery.report import ReportService

logger = logging.getLogger(__name__)

money = config.format_money


def print_collections(service: ReportService, console: Console) -> None:
    console.print("[bold]--- Initial Data (retrieved via Repositories) ---[/]")
    console.print("Customers:")
    for c in service.customers.get_all():
        console.print(f"  Id: {c.id}, Name: {c.name}, City: {c.city}")
    console.print("\nOrders:")
    for o in service.orders.get_all():
        console.print(f"  Id: {o.id}, CustomerId: {o.customer_id}, Total: {money(o.total_amount)}")
    console.print("\nProducts:")
    for p in service.products.get_all():
        console.print(f"  Id: {p.id}, Name: {p.name}, Price: {money(p.price)}")
    console.print("\nOrder Details:")
    for od in service.order_details.get_all():
        console.print(
            f"  DetailId: {od.id}, OrderId: {od.order_id}, "
            f"ProductId: {od.product_id}, Quantity: {od.quantity}"
        )


def print_filters(service: ReportService, console: Console) -> None:
    console.print("\n[bold]--- Filtering Examples (Repository.find with a predicate) ---[/]")

    console.print("\nCustomers from New York:")
    for c in service.customers_in_city("New York"):
        console.print(f"  {c.name}")

    console.print("\nOrders with Total Amount > $100:")
    for o in service.orders_over(Decimal("100")):
        console.print(f"  Order ID: {o.id}, Total: {money(o.total_amount)}")

    console.print("\nAffordable Gadgets (Price < $100 and 'o' in name):")
    for p in service.affordable_products(Decimal("100"), "o"):
        console.print(f"  {p.name} ({money(p.price)})")


def print_joins(service: ReportService, console: Console) -> None:
    console.print("\n[bold]--- Join Examples ---[/]")

    console.print("\nOrders with Customer Names:")
    for row in service.orders_with_customers():
        console.print(
            f"  Order ID: {row.order_id}, Customer: {row.customer_name}, "
            f"Date: {row.order_date.isoformat()}, Total: {money(row.total_amount)}"
        )

    console.print("\nProducts in Orders:")
    for line in service.order_lines():
        console.print(
            f"  Order ID: {line.order_id}, Product: {line.product_name}, "
            f"Quantity: {line.quantity}, Line Total: {money(line.line_total)}"
        )

    console.print("\nCustomers with their Orders (Left Join Simulation):")
    for row in service.customers_with_orders():
        who = f"{row.customer.name} ({row.customer.city})"
        if row.has_order:
            console.print(f"  Customer: {who}, Order ID: {row.order_id}, Total: {money(row.order_total)}")
        else:
            console.print(f"  Customer: {who}, No Orders")


def print_aggregations(service: ReportService, console: Console) -> None:
    console.print("\n[bold]--- Grouping and Aggregation ---[/]")

    console.print("\nTotal Sales by Customer:")
    for row in service.sales_by_customer():
        console.print(
            f"  Customer: {row.customer_name}, Total Sales: {money(row.total_sales)}, "
            f"Orders: {row.number_of_orders}"
        )

    console.print("\nProducts Sold Per Order:")
    for group in service.products_per_order():
        console.print(f"  Order ID: {group.order_id}")
        for p in group.products:
            console.print(f"    - {p.product_name} (Qty: {p.quantity})")


def print_crud(service: ReportService, console: Console, remove_id: int = 4) -> Optional[Customer]:
    """Add a customer, then remove ``remove_id`` if it exists. Returns the removed customer."""
    console.print("\n[bold]--- Repository CRUD Example ---[/]")

    new_customer = Customer(id=6, name="Frank Green", city="Berlin")
    service.customers.add(new_customer)
    console.print(f"\nAdded new customer: {new_customer.name}")
    console.print("Customers after add:")
    for c in service.customers.get_all():
        console.print(f"  {c.name}")

    to_remove = service.customers.get_by_id(remove_id)
    if to_remove is None:
        console.print(f"\nCustomer with ID {remove_id} not found for removal.")
        return None

    service.customers.remove(to_remove)
    console.print(f"\nRemoved customer: {to_remove.name}")
    console.print("Customers after remove:")
    for c in service.customers.get_all():
        console.print(f"  {c.name}")
    return to_remove


def run_demo(source: InMemoryDataSource, console: Console) -> None:
    """Print every demo section in order, mutating ``source`` in the CRUD step."""
    service = ReportService(source)
    logger.info("Running demo over %d customers", service.customers.count())

    print_collections(service, console)
    print_filters(service, console)
    print_joins(service, console)
    print_aggregations(service, console)
    print_crud(service, console)


def main() -> None:
    console = Console()
    setup_logging(console=console)
    run_demo(InMemoryDataSource(), console)


if __name__ == "__main__":
    main()
