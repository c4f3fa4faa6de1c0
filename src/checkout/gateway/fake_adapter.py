"""Configurable fake payment gateway for development and testing.

Simulates the processor without any external calls. It can be configured at
runtime to approve, decline or be unreachable, and records every call so
tests can assert that no charge was attempted.
"""

from uuid import uuid4

from checkout.errors import GatewayUnavailable
from checkout.gateway.port import ChargeOutcome, ChargeRequest, ChargeStatus, PaymentGateway


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    name = "FakeGateway"

    def __init__(self) -> None:
        self.should_approve: bool = True
        self.available: bool = True
        self.response_code: str = "00"
        self.response_text: str = "Approved"
        self.transaction_id: str | None = None
        self.calls: list[ChargeRequest] = []

    def configure(
        self,
        should_approve: bool = True,
        available: bool = True,
        response_code: str | None = None,
        response_text: str | None = None,
        transaction_id: str | None = None,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.should_approve = should_approve
        self.available = available
        self.response_code = response_code or ("00" if should_approve else "05")
        self.response_text = response_text or ("Approved" if should_approve else "Do not honour")
        self.transaction_id = transaction_id

    def create_charge(self, request: ChargeRequest) -> ChargeOutcome:
        self.calls.append(request)

        if not self.available:
            raise GatewayUnavailable("Fake gateway configured as unavailable")

        return ChargeOutcome(
            status=ChargeStatus.APPROVED if self.should_approve else ChargeStatus.DECLINED,
            transaction_id=self.transaction_id or f"fake_txn_{uuid4().hex[:12]}",
            response_code=self.response_code,
            response_text=self.response_text,
        )
