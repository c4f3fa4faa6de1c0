"""Checkout input — the cart and customer state consumed by one attempt.

These are plain immutable values handed to the pipeline by the caller. The
pipeline reads nothing from ambient session state.
"""

import json
from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class CartLine:
    product_id: str
    title: str = ""
    quantity: int = 1
    total_item_price: float = 0.0
    options: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "title": self.title,
            "quantity": self.quantity,
            "total_item_price": self.total_item_price,
            "options": json.dumps(self.options) if self.options else None,
        }


@dataclass(frozen=True)
class CartSnapshot:
    total: float
    shipping: float = 0.0
    item_count: int = 0
    product_count: int = 0
    lines: tuple[CartLine, ...] = ()


@dataclass(frozen=True)
class CustomerDetails:
    email: str
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    address1: str = ""
    address2: str = ""
    country: str = ""
    state: str = ""
    postcode: str = ""
    phone: str = ""
    customer_id: str | None = None

    def snapshot(self) -> dict:
        """Customer fields as copied onto the order."""
        data = asdict(self)
        data.pop("customer_id")
        return data


@dataclass(frozen=True)
class CheckoutRequest:
    single_use_token: str | None
    cart: CartSnapshot
    customer: CustomerDetails
    comment: str = ""
    session_id: str | None = None
