from typing import List

from shopquery.datasource import InMemoryDataSource
from shopquery.models import OrderDetail
from shopquery.repository import BaseRepository


class OrderDetailRepository(BaseRepository[OrderDetail]):
    """
    Repository for order details (line items).
    Adds a lookup by order on top of the generic operations.
    """

    def __init__(self, source: InMemoryDataSource):
        super().__init__(source.order_details, lambda od: od.id)

    def get_by_order_id(self, order_id: int) -> List[OrderDetail]:
        """Get all line items belonging to an order, in list order."""
        return self.find(lambda od: od.order_id == order_id)
