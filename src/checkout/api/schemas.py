"""Pydantic request/response schemas for the Checkout API.

These are external contracts (anti-corruption layer) — separate from the
pipeline's internal request and outcome values.
"""

from pydantic import BaseModel


class SubmitCheckoutRequest(BaseModel):
    session_id: str
    single_use_token: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "session_id": "sess-001",
                    "single_use_token": "1b2a3c4d-single-use",
                }
            ]
        }
    }


class SessionOutcomeSchema(BaseModel):
    message: str
    message_type: str
    payment_approved: bool
    payment_details: str = ""
    payment_email_addr: str | None = None


class CheckoutResponse(BaseModel):
    redirect_target: str
    order_id: str | None = None
    outcome: SessionOutcomeSchema


class OrderLineSchema(BaseModel):
    product_id: str
    title: str | None = None
    quantity: int
    total_item_price: float


class OrderResponse(BaseModel):
    order_id: str
    status: str
    payment_id: str
    payment_gateway: str
    payment_message: str | None = None
    total: float
    shipping: float
    email: str | None = None
    products: list[OrderLineSchema] = []
    outcome: SessionOutcomeSchema | None = None


class OrderSearchResponse(BaseModel):
    order_ids: list[str]
