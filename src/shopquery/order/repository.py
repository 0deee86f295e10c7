from typing import List

from shopquery.datasource import InMemoryDataSource
from shopquery.models import Order
from shopquery.repository import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """
    Repository for orders.
    Adds a lookup by customer on top of the generic operations.
    """

    def __init__(self, source: InMemoryDataSource):
        super().__init__(source.orders, lambda o: o.id)

    def get_by_customer_id(self, customer_id: int) -> List[Order]:
        """Get all orders placed by a customer, in list order."""
        return self.find(lambda o: o.customer_id == customer_id)
