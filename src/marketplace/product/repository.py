"""Repository for the Product aggregate."""

from datetime import UTC, datetime

from protean.core.repository import BaseRepository

from marketplace.domain import marketplace
from marketplace.product.product import Product
from marketplace.product.query import ProductQuery


def prepare_for_persist(product: Product) -> Product:
    """Refresh derived fields immediately before a write."""
    product.updated_at = datetime.now(UTC)
    return product


@marketplace.repository(part_of=Product)
class ProductRepository(BaseRepository):
    def add(self, product: Product) -> Product:
        return super().add(prepare_for_persist(product))

    def remove(self, product: Product) -> None:
        self._dao.delete(product)

    def search(self, query: ProductQuery):
        """Run a listing query and return Protean's ``ResultSet``.

        ``ResultSet.total`` counts every record matching the predicate, not
        just the current page.
        """
        queryset = self._dao.query
        criteria = query.criteria()
        if criteria is not None:
            queryset = queryset.filter(criteria)

        return queryset.order_by(query.ordering()).offset(query.offset).limit(query.limit).all()
