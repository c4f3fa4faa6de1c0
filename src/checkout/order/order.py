"""Order aggregate — the durable record of one checkout attempt.

An Order is written exactly once, after the payment gateway has produced a
definitive outcome (approved or declined). The customer details and cart
lines are copied onto the order at checkout time and are never re-joined
from a live customer record.

This pipeline never changes ``status`` or ``payment_id`` once the order is
recorded; the aggregate exposes no method that does.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from checkout.domain import checkout
from checkout.order.events import OrderRecorded


class OrderStatus(Enum):
    PAID = "Paid"
    DECLINED = "Declined"


class OrderType(Enum):
    SINGLE = "Single"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@checkout.value_object(part_of="Order")
class CustomerSnapshot:
    """Customer identity and address as entered at checkout.

    Stored as typed, with no length limits: the storefront has already
    accepted these values by the time the order is written.
    """

    email = Text()
    company = Text()
    first_name = Text()
    last_name = Text()
    address1 = Text()
    address2 = Text()
    country = Text()
    state = Text()
    postcode = Text()
    phone = Text()

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@checkout.entity(part_of="Order")
class OrderLine:
    """A cart line copied onto the order."""

    product_id = Text(required=True)
    title = Text()
    quantity = Integer(default=1)
    total_item_price = Float(default=0.0)
    options = Text()


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@checkout.aggregate
class Order:
    payment_id = Text(required=True)
    payment_gateway = String(required=True, max_length=50)
    payment_message = Text()
    total = Float(required=True, min_value=0.0)
    shipping = Float(default=0.0, min_value=0.0)
    item_count = Integer(default=0)
    product_count = Integer(default=0)
    customer_id = Identifier()
    customer = ValueObject(CustomerSnapshot)
    comment = Text()
    status = String(required=True, choices=OrderStatus)
    order_type = String(choices=OrderType, default=OrderType.SINGLE.value)
    products = HasMany(OrderLine)
    created_at = DateTime()

    @invariant.post
    def counts_cannot_be_negative(self):
        if (self.item_count or 0) < 0 or (self.product_count or 0) < 0:
            raise ValidationError({"item_count": ["Item and product counts cannot be negative"]})

    @classmethod
    def record(
        cls,
        payment_id: str,
        payment_gateway: str,
        payment_message: str,
        status: str,
        total: float,
        shipping: float = 0.0,
        item_count: int = 0,
        product_count: int = 0,
        customer_id: str | None = None,
        customer: dict | None = None,
        comment: str | None = None,
        products: list[dict] | None = None,
    ):
        """Build a new order from a completed gateway interaction."""
        now = datetime.now(UTC)
        snapshot = CustomerSnapshot(**(customer or {}))
        order = cls(
            payment_id=payment_id,
            payment_gateway=payment_gateway,
            payment_message=payment_message,
            status=status,
            total=total,
            shipping=shipping,
            item_count=item_count,
            product_count=product_count,
            customer_id=customer_id,
            customer=snapshot,
            comment=comment,
            products=[OrderLine(**line) for line in (products or [])],
            created_at=now,
        )
        order.raise_(
            OrderRecorded(
                order_id=str(order.id),
                payment_id=payment_id,
                payment_gateway=payment_gateway,
                status=status,
                total=total,
                email=snapshot.email,
                recorded_at=now,
            )
        )
        return order

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID.value
