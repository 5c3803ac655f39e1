"""Tests for the Order aggregate: placement pricing and permissive status updates."""

import pytest
from protean.exceptions import ValidationError

from marketplace.order.events import OrderPlaced, OrderStatusChanged
from marketplace.order.order import Order, OrderStatus, PaymentStatus

ADDRESS = {
    "street": "12 Market Street",
    "city": "Springfield",
    "state": "IL",
    "zip_code": "62701",
    "country": "US",
}

ITEMS = [
    {"product_id": "prod-1", "name": "Mug", "quantity": 2, "price": 10.0, "image": None},
    {"product_id": "prod-2", "name": "Pen", "quantity": 1, "price": 5.0},
]


def _place(**overrides):
    defaults = {
        "user_id": "user-001",
        "items": ITEMS,
        "shipping_address": ADDRESS,
        "payment_method": "credit_card",
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestOrderPlacement:
    def test_defaults(self):
        order = _place()
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_info.status == PaymentStatus.PENDING.value
        assert order.payment_info.method == "credit_card"
        assert order.delivered_at is None
        assert len(order.items) == 2

    def test_total_without_tax_or_shipping(self):
        order = _place()
        assert order.subtotal == pytest.approx(25.0)
        assert order.tax == 0.0
        assert order.shipping_fee == 0.0
        assert order.total_amount == pytest.approx(25.0)

    def test_total_includes_tax_and_shipping(self):
        order = _place(tax_rate=0.1, shipping_fee=4.0)
        assert order.tax == pytest.approx(2.5)
        assert order.total_amount == pytest.approx(31.5)

    def test_shipping_address_is_captured(self):
        order = _place()
        assert order.shipping_address.city == "Springfield"
        assert order.shipping_address.zip_code == "62701"

    def test_incomplete_address_rejected(self):
        address = {k: v for k, v in ADDRESS.items() if k != "zip_code"}
        with pytest.raises(ValidationError):
            _place(shipping_address=address)

    def test_unknown_payment_method_rejected(self):
        with pytest.raises(ValidationError):
            _place(payment_method="bitcoin")

    def test_item_name_required(self):
        with pytest.raises(ValidationError):
            _place(items=[{"product_id": "prod-1", "quantity": 1, "price": 1.0}])

    def test_place_raises_order_placed(self):
        order = _place()
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.item_count == 2
        assert event.total_amount == pytest.approx(25.0)


class TestOrderStatus:
    def test_any_status_in_any_order(self):
        order = _place()
        for status in ("shipped", "pending", "cancelled", "processing"):
            order.update_status(status=status)
            assert order.status == status

    def test_delivered_stamps_delivered_at(self):
        order = _place()
        order.update_status(status="delivered")
        assert order.delivered_at is not None

    def test_unknown_status_rejected(self):
        order = _place()
        with pytest.raises(ValidationError):
            order.update_status(status="returned")

    def test_payment_status_and_transaction(self):
        order = _place()
        order.update_status(payment_status="completed", transaction_id="txn-123")
        assert order.payment_info.status == "completed"
        assert order.payment_info.transaction_id == "txn-123"
        assert order.payment_info.method == "credit_card"
        assert order.status == "pending"

    def test_unknown_payment_status_rejected(self):
        order = _place()
        with pytest.raises(ValidationError):
            order.update_status(payment_status="disputed")

    def test_status_change_raises_event(self):
        order = _place()
        order._events.clear()

        order.update_status(status="processing")

        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.status == "processing"
        assert event.payment_status == "pending"

    def test_no_op_update_raises_no_event(self):
        order = _place()
        order._events.clear()
        order.update_status()
        assert order._events == []
