"""Checkout — converts the acting user's cart into an order."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.cart.cart import ShoppingCart
from marketplace.domain import marketplace
from marketplace.order.order import Order, PaymentMethod

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: address dict
    payment_method = String(required=True, choices=PaymentMethod)


def _pricing_settings():
    custom = current_domain.config.get("custom", {})
    return float(custom.get("tax_rate", 0.0)), float(custom.get("shipping_fee", 0.0))


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.for_user(command.user_id)
        if cart is None or not cart.items:
            raise ValidationError({"cart": ["Cannot place an order with an empty cart"]})

        shipping_address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )
        tax_rate, shipping_fee = _pricing_settings()

        order = Order.place(
            user_id=command.user_id,
            items=[
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "quantity": item.quantity,
                    "price": item.price,
                    "image": item.image,
                }
                for item in cart.items
            ],
            shipping_address=shipping_address,
            payment_method=command.payment_method,
            tax_rate=tax_rate,
            shipping_fee=shipping_fee,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total_amount=order.total_amount,
        )
        return str(order.id)
