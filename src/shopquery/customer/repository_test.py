"""
Tests for CustomerRepository.

Run with: pytest src/shopquery/customer/repository_test.py -v
"""

import pytest

from shopquery.customer import CustomerRepository
from shopquery.models import Customer


class TestGetById:
    """Tests for CustomerRepository.get_by_id()"""

    @pytest.mark.parametrize("customer_id,name", [
        (1, "Alice Smith"),
        (4, "Diana Miller"),
        (5, "Eve Davis"),
    ])
    def test_get_by_id_success(self, customer_repo, customer_id, name):
        result = customer_repo.get_by_id(customer_id)

        assert result is not None
        assert result.name == name

    def test_get_by_id_not_found(self, customer_repo):
        assert customer_repo.get_by_id(99999) is None


class TestFind:
    """Tests for CustomerRepository.find()"""

    def test_find_new_york(self, customer_repo):
        result = customer_repo.find(lambda c: c.city == "New York")

        assert [c.name for c in result] == ["Alice Smith", "Charlie Brown"]

    def test_find_unknown_city(self, customer_repo):
        assert customer_repo.find(lambda c: c.city == "Tokyo") == []


class TestSharedSource:
    """Repositories over the same source see each other's changes."""

    def test_add_visible_to_second_repository(self, source, customer_repo):
        other = CustomerRepository(source)

        customer_repo.add(Customer(id=6, name="Frank Green", city="Berlin"))

        assert other.get_by_id(6).name == "Frank Green"
        assert source.customers[-1].city == "Berlin"

    def test_sources_are_independent(self, source, customer_repo):
        from shopquery.datasource import InMemoryDataSource

        customer_repo.remove(customer_repo.get_by_id(1))
        fresh = CustomerRepository(InMemoryDataSource())

        assert customer_repo.get_by_id(1) is None
        assert fresh.get_by_id(1) is not None

    def test_empty_source(self, empty_source):
        repo = CustomerRepository(empty_source)

        assert repo.get_all() == []
        assert repo.get_by_id(1) is None
