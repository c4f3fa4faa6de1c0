"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from checkout.domain import checkout


@checkout.event(part_of="Order")
class OrderRecorded:
    """An order was durably recorded after a completed gateway interaction."""

    __version__ = 1

    order_id = Identifier(required=True)
    payment_id = String(required=True)
    payment_gateway = String(required=True)
    status = String(required=True)
    total = Float(required=True)
    email = String()
    recorded_at = DateTime(required=True)
