from shopquery.datasource import InMemoryDataSource
from shopquery.models import Customer
from shopquery.repository import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """Repository for customers, keyed by customer id."""

    def __init__(self, source: InMemoryDataSource):
        super().__init__(source.customers, lambda c: c.id)
