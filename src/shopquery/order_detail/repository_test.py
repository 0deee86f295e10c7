"""
Tests for OrderDetailRepository.

Run with: pytest src/shopquery/order_detail/repository_test.py -v
"""

import pytest

from shopquery.models import OrderDetail


class TestGetByOrderId:
    """Tests for OrderDetailRepository.get_by_order_id()"""

    @pytest.mark.parametrize("order_id,expected_ids", [
        (101, [1, 2]),
        (102, [3, 4]),
        (104, [6, 7]),
        (106, [9]),
        (999, []),
    ])
    def test_get_by_order_id(self, order_detail_repo, order_id, expected_ids):
        result = order_detail_repo.get_by_order_id(order_id)

        assert [od.id for od in result] == expected_ids

    def test_dangling_order_reference_is_allowed(self, order_detail_repo, order_repo):
        order_repo.remove(order_repo.get_by_id(101))

        result = order_detail_repo.get_by_order_id(101)

        assert [od.product_id for od in result] == [1, 2]

    def test_add_range_then_lookup(self, order_detail_repo):
        order_detail_repo.add_range([
            OrderDetail(id=10, order_id=200, product_id=1, quantity=4),
            OrderDetail(id=11, order_id=200, product_id=3, quantity=1),
        ])

        result = order_detail_repo.get_by_order_id(200)

        assert [od.id for od in result] == [10, 11]
        assert order_detail_repo.count() == 11
