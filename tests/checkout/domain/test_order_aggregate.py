"""Tests for Order aggregate creation and structure."""

import pytest
from checkout.order.events import OrderRecorded
from checkout.order.order import CustomerSnapshot, Order, OrderStatus, OrderType
from protean.exceptions import ValidationError


def _record_order(**overrides):
    defaults = {
        "payment_id": "TXN1",
        "payment_gateway": "PayWay",
        "payment_message": "00 - Approved",
        "status": OrderStatus.PAID.value,
        "total": 49.95,
        "shipping": 5.0,
        "item_count": 3,
        "product_count": 2,
        "customer_id": "cust-001",
        "customer": {
            "email": "jane@example.com",
            "first_name": "Jane",
            "last_name": "Citizen",
            "postcode": "2000",
        },
        "comment": "Leave at the door",
        "products": [
            {"product_id": "prod-1", "title": "Coffee mug", "quantity": 2, "total_item_price": 29.95},
        ],
    }
    defaults.update(overrides)
    return Order.record(**defaults)


class TestOrderRecord:
    def test_record_sets_payment_fields(self):
        order = _record_order()
        assert order.payment_id == "TXN1"
        assert order.payment_gateway == "PayWay"
        assert order.payment_message == "00 - Approved"

    def test_record_sets_totals(self):
        order = _record_order()
        assert order.total == 49.95
        assert order.shipping == 5.0
        assert order.item_count == 3
        assert order.product_count == 2

    def test_record_copies_customer_snapshot(self):
        order = _record_order()
        assert isinstance(order.customer, CustomerSnapshot)
        assert order.customer.email == "jane@example.com"
        assert order.customer.full_name == "Jane Citizen"

    def test_record_copies_product_lines(self):
        order = _record_order()
        assert len(order.products) == 1
        assert order.products[0].product_id == "prod-1"
        assert order.products[0].quantity == 2

    def test_record_defaults_order_type_to_single(self):
        order = _record_order()
        assert order.order_type == OrderType.SINGLE.value

    def test_record_sets_created_at(self):
        order = _record_order()
        assert order.created_at is not None

    def test_paid_order_is_paid(self):
        assert _record_order().is_paid is True

    def test_declined_order_is_not_paid(self):
        order = _record_order(status=OrderStatus.DECLINED.value)
        assert order.is_paid is False


class TestOrderRecordedEvent:
    def test_record_raises_order_recorded(self):
        order = _record_order()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderRecorded)
        assert event.order_id == str(order.id)
        assert event.payment_id == "TXN1"
        assert event.status == "Paid"
        assert event.email == "jane@example.com"


class TestOrderValidation:
    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _record_order(status="Pending")

    def test_payment_id_required(self):
        with pytest.raises(ValidationError):
            _record_order(payment_id=None)

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            _record_order(total=-1.0)

    def test_free_text_fields_have_no_length_limit(self):
        order = _record_order(
            comment="x" * 2500,
            customer={"email": "jane@example.com", "address1": "a" * 400},
            products=[{"product_id": "prod-1", "title": "t" * 300, "options": "o" * 1500}],
        )
        assert len(order.comment) == 2500
        assert len(order.customer.address1) == 400
        assert len(order.products[0].title) == 300

    def test_zero_quantity_line_accepted(self):
        order = _record_order(products=[{"product_id": "prod-1", "quantity": 0}])
        assert order.products[0].quantity == 0

    def test_product_id_required(self):
        with pytest.raises(ValidationError):
            _record_order(products=[{"title": "No id"}])
