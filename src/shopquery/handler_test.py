"""
Tests for the serverless handler.

Run with: pytest src/shopquery/handler_test.py -v
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from shopquery.config import config
from shopquery.handler import filter_fruits, handler


class TestFilterFruits:
    """Tests for handler.filter_fruits()"""

    @pytest.mark.parametrize("prefix,expected", [
        ("a", ["apple", "apple"]),
        ("b", ["banana"]),
        ("pe", ["pear"]),
        ("z", []),
        ("", ["apple", "banana", "cherry", "grape", "apple", "pear"]),
    ])
    def test_filter_fruits(self, prefix, expected):
        assert filter_fruits(prefix) == expected


class TestHandler:
    """Tests for handler.handler()"""

    @pytest.fixture(autouse=True)
    def default_prefix(self):
        with patch.object(config, "default_fruit_prefix", "a"):
            yield

    def test_default_prefix(self, console):
        assert handler(None, None, console=console) == ["apple", "apple"]

    def test_empty_input_uses_default(self, console):
        assert handler("", None, console=console) == ["apple", "apple"]

    @pytest.mark.parametrize("event", [
        "b",
        "pear",
        {"key1": "value1", "key2": "value2"},
        ["g"],
        42,
    ])
    def test_payload_does_not_change_result(self, console, event):
        context = SimpleNamespace(aws_request_id="req-1")

        assert handler(event, context, console=console) == ["apple", "apple"]

    def test_uses_configured_prefix(self, console):
        with patch.object(config, "default_fruit_prefix", "g"):
            assert handler("a", None, console=console) == ["grape"]

    def test_runs_demo_on_fresh_source(self, console, console_text):
        handler(None, None, console=console)
        handler(None, None, console=console)

        # Each invocation starts from the seeded data again
        assert console_text().count("Removed customer: Diana Miller") == 2

    def test_demo_errors_propagate(self, console):
        with patch("shopquery.handler.run_demo", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError, match="boom"):
                handler(None, None, console=console)
