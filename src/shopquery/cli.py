#!/usr/bin/env python3
"""Shopquery CLI for browsing the sample data."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from shopquery.config import config
from shopquery.customer import CustomerRepository
from shopquery.datasource import InMemoryDataSource
from shopquery.logging_setup import setup_logging
from shopquery.models import Customer
from shopquery.order import OrderRepository
from shopquery.order_detail import OrderDetailRepository
from shopquery.product import ProductRepository
from shopquery.report import ReportService

console = Console()

COLLECTIONS = ("customers", "orders", "products", "order-details")


def build_table(title: str, columns: list[str], rows: list[list]) -> Table:
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*[str(value) for value in row])
    return table


def list_collection(source: InMemoryDataSource, name: str) -> None:
    """Print one collection as a table."""
    money = config.format_money
    if name == "customers":
        rows = [[c.id, c.name, c.city] for c in CustomerRepository(source).get_all()]
        table = build_table("Customers", ["Id", "Name", "City"], rows)
    elif name == "orders":
        rows = [
            [o.id, o.customer_id, o.order_date.isoformat(), money(o.total_amount)]
            for o in OrderRepository(source).get_all()
        ]
        table = build_table("Orders", ["Id", "Customer", "Date", "Total"], rows)
    elif name == "products":
        rows = [[p.id, p.name, money(p.price)] for p in ProductRepository(source).get_all()]
        table = build_table("Products", ["Id", "Name", "Price"], rows)
    else:
        rows = [
            [od.id, od.order_id, od.product_id, od.quantity]
            for od in OrderDetailRepository(source).get_all()
        ]
        table = build_table("Order Details", ["Id", "Order", "Product", "Quantity"], rows)
    console.print(table)


def show_customer_orders(source: InMemoryDataSource, customer_id: int) -> None:
    customer = CustomerRepository(source).get_by_id(customer_id)
    if customer is None:
        console.print(f"[red]Customer {customer_id} not found.[/]")
        return

    orders = OrderRepository(source).get_by_customer_id(customer_id)
    if not orders:
        console.print(f"[yellow]{customer.name} has no orders.[/]")
        return

    rows = [[o.id, o.order_date.isoformat(), config.format_money(o.total_amount)] for o in orders]
    console.print(build_table(f"Orders for {customer.name}", ["Id", "Date", "Total"], rows))


def show_order_details(source: InMemoryDataSource, order_id: int) -> None:
    order = OrderRepository(source).get_by_id(order_id)
    if order is None:
        console.print(f"[red]Order {order_id} not found.[/]")
        return

    products = ProductRepository(source)
    rows = []
    for od in OrderDetailRepository(source).get_by_order_id(order_id):
        product = products.get_by_id(od.product_id)
        rows.append([od.id, product.name if product else f"#{od.product_id}", od.quantity])
    console.print(build_table(f"Order {order_id}", ["Detail", "Product", "Quantity"], rows))


def show_sales(source: InMemoryDataSource) -> None:
    rows = [
        [r.customer_name, config.format_money(r.total_sales), r.number_of_orders]
        for r in ReportService(source).sales_by_customer()
    ]
    console.print(build_table("Total Sales by Customer", ["Customer", "Total", "Orders"], rows))


def select_customer(repo: CustomerRepository) -> Customer | None:
    """Prompt the user to select a customer."""
    customers = repo.get_all()
    if not customers:
        console.print("[red]No customers found.[/]")
        return None
    return questionary.select(
        "Select a customer:",
        choices=[questionary.Choice(title=f"{c.name} ({c.city})", value=c) for c in customers],
    ).ask()


def remove_customer(source: InMemoryDataSource) -> None:
    """Interactively remove a customer from this session's data."""
    repo = CustomerRepository(source)
    customer = select_customer(repo)
    # User pressed Ctrl+C or Escape
    if customer is None:
        console.print("[dim]Cancelled.[/]")
        return

    orders = OrderRepository(source).get_by_customer_id(customer.id)
    console.print(
        f"[yellow]Will remove [bold]{customer.name}[/bold] "
        f"({len(orders)} order(s) will keep pointing at id {customer.id}).[/]"
    )
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    repo.remove(customer)
    console.print(f"[green]Removed {customer.name}.[/]")
    list_collection(source, "customers")


def invoke(event: str | None) -> None:
    """Run the serverless handler locally and print its return value."""
    from shopquery.handler import handler

    result = handler(event, None, console=console)
    console.print(f"\n[green]Handler returned:[/] {result}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Shopquery CLI")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Run the full repository demo")

    list_parser = subparsers.add_parser("list", help="Print a collection")
    list_parser.add_argument("collection", choices=COLLECTIONS)

    orders_parser = subparsers.add_parser("orders", help="Orders for a customer")
    orders_parser.add_argument("--customer-id", type=int, required=True)

    details_parser = subparsers.add_parser("details", help="Line items for an order")
    details_parser.add_argument("--order-id", type=int, required=True)

    subparsers.add_parser("sales", help="Total sales by customer")

    invoke_parser = subparsers.add_parser("invoke", help="Run the serverless handler locally")
    invoke_parser.add_argument("--input", dest="event", default=None, help="Payload passed to the handler")

    subparsers.add_parser("remove-customer", help="Interactively remove a customer")

    args = parser.parse_args(argv)
    setup_logging(args.log_level, console=console)

    source = InMemoryDataSource()

    if args.command == "demo":
        from shopquery.demo import run_demo

        run_demo(source, console)
    elif args.command == "list":
        list_collection(source, args.collection)
    elif args.command == "orders":
        show_customer_orders(source, args.customer_id)
    elif args.command == "details":
        show_order_details(source, args.order_id)
    elif args.command == "sales":
        show_sales(source)
    elif args.command == "invoke":
        invoke(args.event)
    elif args.command == "remove-customer":
        remove_customer(source)


if __name__ == "__main__":
    main()
