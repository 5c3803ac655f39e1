"""Order status management — admin-only command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.order.order import Order, OrderStatus, PaymentStatus
from marketplace.order.queries import load_order
from marketplace.shared.access import Actor, ensure_admin

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    actor_id = Identifier(required=True)
    actor_role = String(required=True, max_length=10)
    status = String(choices=OrderStatus)
    payment_status = String(choices=PaymentStatus)
    transaction_id = String(max_length=255)


@marketplace.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        actor = Actor(id=str(command.actor_id), role=command.actor_role)
        order = load_order(command.order_id)
        ensure_admin(actor, "update order status")

        order.update_status(
            status=command.status,
            payment_status=command.payment_status,
            transaction_id=command.transaction_id,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order status updated",
            order_id=str(order.id),
            status=order.status,
            payment_status=order.payment_info.status,
        )
        return str(order.id)
