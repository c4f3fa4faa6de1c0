"""Outcome resolution — maps a checkout attempt to what the customer sees.

Pure functions: they build the SessionOutcome and the redirect target and
touch nothing else.
"""

from dataclasses import dataclass
from enum import Enum
from html import escape

PAYMENT_FORM_REDIRECT = "/checkout/payment"

MESSAGE_FAILED = "Your payment has failed. Please try again"
MESSAGE_DECLINED = "Your payment has declined. Please try again"
MESSAGE_SUCCESS = "Your payment was successfully completed"


class MessageType(Enum):
    SUCCESS = "success"
    DANGER = "danger"


class Resolution(Enum):
    """Which row of the outcome table an attempt landed on."""

    MISSING_TOKEN = "missing_token"
    INVALID_DETAILS = "invalid_details"
    GATEWAY_UNAVAILABLE = "gateway_unavailable"
    DECLINED = "declined"
    PAID = "paid"
    PERSISTENCE_FAILED = "persistence_failed"


@dataclass(frozen=True)
class SessionOutcome:
    message: str
    message_type: str
    payment_approved: bool
    payment_details: str = ""
    payment_email_addr: str | None = None

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "message_type": self.message_type,
            "payment_approved": self.payment_approved,
            "payment_details": self.payment_details,
            "payment_email_addr": self.payment_email_addr,
        }


def confirmation_redirect(order_id: str) -> str:
    return f"/payment/{order_id}"


def payment_details(order_id: str, transaction_id: str) -> str:
    """HTML detail block; both identifiers are escaped."""
    return (
        f"<p><strong>Order ID: </strong>{escape(str(order_id))}</p>"
        f"<p><strong>Transaction ID: </strong>{escape(str(transaction_id))}</p>"
    )


def resolve_outcome(
    resolution: Resolution,
    order_id: str | None = None,
    transaction_id: str | None = None,
    email: str | None = None,
) -> tuple[str, SessionOutcome]:
    """Return ``(redirect_target, outcome)`` for a finished attempt."""
    if resolution == Resolution.PAID:
        return confirmation_redirect(order_id), SessionOutcome(
            message=MESSAGE_SUCCESS,
            message_type=MessageType.SUCCESS.value,
            payment_approved=True,
            payment_details=payment_details(order_id, transaction_id),
            payment_email_addr=email,
        )

    if resolution == Resolution.DECLINED:
        return confirmation_redirect(order_id), SessionOutcome(
            message=MESSAGE_DECLINED,
            message_type=MessageType.DANGER.value,
            payment_approved=False,
            payment_details=payment_details(order_id, transaction_id),
        )

    # Rejected before the gateway was called: nothing was charged.
    if resolution in (Resolution.MISSING_TOKEN, Resolution.INVALID_DETAILS):
        message = MESSAGE_FAILED
    else:
        message = MESSAGE_DECLINED
    return PAYMENT_FORM_REDIRECT, SessionOutcome(
        message=message,
        message_type=MessageType.DANGER.value,
        payment_approved=False,
    )
