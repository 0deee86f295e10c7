from shopquery.datasource import InMemoryDataSource
from shopquery.models import Product
from shopquery.repository import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for products, keyed by product id."""

    def __init__(self, source: InMemoryDataSource):
        super().__init__(source.products, lambda p: p.id)
