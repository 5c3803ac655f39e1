"""Read side of orders: own-order listing and gated retrieval."""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.order.order import Order
from marketplace.shared.access import Actor, ensure_can_modify
from marketplace.shared.pagination import page_window, pagination_links


@dataclass(frozen=True)
class OrderPage:
    orders: list
    total: int
    pagination: dict = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.orders)


def load_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError(f"Order not found with id of {order_id}") from None


def get_order(actor: Actor, order_id) -> Order:
    order = load_order(order_id)
    ensure_can_modify(actor, order.user_id, "view", resource="order")
    return order


def list_orders(actor: Actor, page: int, limit: int) -> OrderPage:
    """Admins see every order, everyone else only their own."""
    offset, limit = page_window(page, limit)
    result = current_domain.repository_for(Order).page(
        offset, limit, user_id=None if actor.is_admin else actor.id
    )
    return OrderPage(
        orders=list(result.items),
        total=result.total,
        pagination=pagination_links(page, limit, result.total),
    )
