# src/shopquery/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides fixtures available to all tests in the package.
"""

import logging
import os

# Set environment BEFORE importing any app modules
os.environ["SHOPQUERY_ENV"] = "test"

from io import StringIO

import pytest
from rich.console import Console
from rich.logging import RichHandler

from shopquery.datasource import InMemoryDataSource

# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging() and restore the root level after each test."""
    root = logging.getLogger()
    level = root.level

    yield root

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)


# =============================================================================
# Data Source Fixtures
# =============================================================================


@pytest.fixture
def source() -> InMemoryDataSource:
    """
    Provide a freshly seeded data source.

    Each test gets its own lists, so adds and removes never leak between
    tests.
    """
    return InMemoryDataSource()


@pytest.fixture
def empty_source() -> InMemoryDataSource:
    """Provide a data source with no rows at all."""
    return InMemoryDataSource.empty()


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def customer_repo(source):
    from shopquery.customer import CustomerRepository

    return CustomerRepository(source)


@pytest.fixture
def order_repo(source):
    from shopquery.order import OrderRepository

    return OrderRepository(source)


@pytest.fixture
def product_repo(source):
    from shopquery.product import ProductRepository

    return ProductRepository(source)


@pytest.fixture
def order_detail_repo(source):
    from shopquery.order_detail import OrderDetailRepository

    return OrderDetailRepository(source)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def report_service(source):
    from shopquery.report import ReportService

    return ReportService(source)


# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def console() -> Console:
    """Provide a rich console that records to memory instead of a terminal."""
    return Console(file=StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def console_text(console):
    """Return a callable giving everything printed to the console so far."""
    return lambda: console.file.getvalue()
