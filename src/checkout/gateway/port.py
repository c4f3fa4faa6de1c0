"""Payment gateway port (abstract interface).

Defines the charge payload sent to the processor, the normalized outcome it
returns, and the contract every gateway adapter implements. Swapping between
FakeGateway (dev/test) and PayWayGateway (production) needs no change to the
checkout pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from uuid import uuid4

TRANSACTION_TYPE = "payment"
CUSTOMER_NUMBER_LENGTH = 20

_CENTS = Decimal("0.01")


class ChargeStatus(Enum):
    APPROVED = "approved"
    DECLINED = "declined"


def format_amount(amount) -> str:
    """Format a cart total with exactly two decimal places (``49.95``)."""
    return str(Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def generate_customer_number() -> str:
    """A fresh per-attempt reference sent as the processor's customer number."""
    return uuid4().hex[:CUSTOMER_NUMBER_LENGTH]


@dataclass(frozen=True)
class ChargeRequest:
    """Normalized charge payload for one checkout attempt."""

    single_use_token: str
    customer_number: str
    principal_amount: str
    currency: str
    merchant_id: str
    transaction_type: str = TRANSACTION_TYPE

    @classmethod
    def build(cls, single_use_token: str, amount, currency: str, merchant_id: str) -> "ChargeRequest":
        return cls(
            single_use_token=single_use_token,
            customer_number=generate_customer_number(),
            principal_amount=format_amount(amount),
            currency=currency,
            merchant_id=merchant_id,
        )

    def to_form(self) -> dict[str, str]:
        """Form-encoded field names expected by the processor."""
        return {
            "singleUseTokenId": self.single_use_token,
            "customerNumber": self.customer_number,
            "transactionType": self.transaction_type,
            "principalAmount": self.principal_amount,
            "currency": self.currency,
            "merchantId": self.merchant_id,
        }


@dataclass(frozen=True)
class ChargeOutcome:
    """Result of a completed processor interaction.

    A declined outcome is a successful interaction with a negative business
    result, not a failure to talk to the processor.
    """

    status: ChargeStatus
    transaction_id: str
    response_code: str = ""
    response_text: str = ""

    @property
    def approved(self) -> bool:
        return self.status == ChargeStatus.APPROVED

    @property
    def message(self) -> str:
        return f"{self.response_code} - {self.response_text}"


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    name: str = "Gateway"

    @abstractmethod
    def create_charge(self, request: ChargeRequest) -> ChargeOutcome:
        """Perform exactly one synchronous charge attempt.

        Raises:
            GatewayUnavailable: on transport errors, timeouts, HTTP errors or
                a response body that cannot be parsed into an outcome.
        """
        ...
