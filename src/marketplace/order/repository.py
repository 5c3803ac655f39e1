"""Repository for the Order aggregate."""

from datetime import UTC, datetime

from protean.core.repository import BaseRepository

from marketplace.domain import marketplace
from marketplace.order.order import Order


@marketplace.repository(part_of=Order)
class OrderRepository(BaseRepository):
    def add(self, order: Order) -> Order:
        order.updated_at = datetime.now(UTC)
        return super().add(order)

    def page(self, offset: int, limit: int, user_id=None):
        """Newest-first window of orders, optionally restricted to one user."""
        queryset = self._dao.query
        if user_id is not None:
            queryset = queryset.filter(user_id=str(user_id))
        return queryset.order_by(["-created_at"]).offset(offset).limit(limit).all()
