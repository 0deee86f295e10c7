"""
Serverless entry point.

``handler(event, context)`` matches the Lambda-style signature: an optional
string payload plus a runtime context object. It runs the repository demo
(console text only) and returns the sample fruit names starting with the
configured prefix, whatever the payload.
"""

import logging
from typing import Any, List, Optional

from rich.console import Console

from shopquery.config import config
from shopquery.datasource import InMemoryDataSource
from shopquery.demo import run_demo

logger = logging.getLogger(__name__)

FRUITS = ("apple", "banana", "cherry", "grape", "apple", "pear")


def filter_fruits(prefix: str) -> List[str]:
    """Fruits starting with ``prefix``, duplicates and order kept."""
    return [f for f in FRUITS if f.startswith(prefix)]


def handler(event: Any, context: Any, console: Optional[Console] = None) -> List[str]:
    request_id = getattr(context, "aws_request_id", None)
    logger.info("Invoked with input=%r request_id=%s", event, request_id)

    run_demo(InMemoryDataSource(), console or Console())

    # The payload is logged only; it never changes the result
    return filter_fruits(config.default_fruit_prefix)
