"""Order aggregate — a purchase converted from a user's cart.

Line items are snapshots: the product name, unit price and image are copied at
checkout and never follow later catalog changes. Order status and payment
status are independent enumerations; any value may be set in any order.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from marketplace.domain import marketplace
from marketplace.order.events import OrderPlaced, OrderStatusChanged


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    STRIPE = "stripe"
    CASH_ON_DELIVERY = "cash_on_delivery"


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@marketplace.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, captured at checkout time."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@marketplace.value_object(part_of="Order")
class PaymentInfo:
    method = String(required=True, choices=PaymentMethod)
    transaction_id = String(max_length=255)
    status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@marketplace.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)
    image = Text()  # URL length is unbounded on Product.images

    @property
    def line_total(self):
        return self.price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@marketplace.aggregate
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress, required=True)
    payment_info = ValueObject(PaymentInfo, required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total_amount = Float(required=True, min_value=0.0)
    tax = Float(default=0.0, min_value=0.0)
    shipping_fee = Float(default=0.0, min_value=0.0)
    created_at = DateTime()
    updated_at = DateTime()
    delivered_at = DateTime()

    @property
    def subtotal(self):
        return sum((item.line_total for item in self.items), 0.0)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, items, shipping_address, payment_method, tax_rate=0.0, shipping_fee=0.0):
        """Create an order from cart line snapshots.

        ``items`` is an iterable of dicts with ``product_id``, ``name``,
        ``quantity``, ``price`` and optionally ``image``.
        """
        order_items = [OrderItem(**item) for item in items]
        subtotal = sum((item.line_total for item in order_items), 0.0)
        tax = subtotal * tax_rate
        now = datetime.now(UTC)

        order = cls(
            user_id=user_id,
            items=order_items,
            shipping_address=ShippingAddress(**shipping_address),
            payment_info=PaymentInfo(method=payment_method),
            tax=tax,
            shipping_fee=shipping_fee,
            total_amount=subtotal + tax + shipping_fee,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                item_count=len(order_items),
                total_amount=order.total_amount,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def update_status(self, status=None, payment_status=None, transaction_id=None):
        """Set the order and/or payment status. No transition graph is enforced."""
        if status is None and payment_status is None and transaction_id is None:
            return

        if status is not None:
            self.status = status
            if status == OrderStatus.DELIVERED.value:
                self.delivered_at = datetime.now(UTC)

        if payment_status is not None or transaction_id is not None:
            # Value objects are immutable; replace the whole payment record
            self.payment_info = PaymentInfo(
                method=self.payment_info.method,
                transaction_id=transaction_id if transaction_id is not None else self.payment_info.transaction_id,
                status=payment_status if payment_status is not None else self.payment_info.status,
            )

        self.updated_at = datetime.now(UTC)
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                status=self.status,
                payment_status=self.payment_info.status,
                transaction_id=self.payment_info.transaction_id,
                changed_at=self.updated_at,
            )
        )
