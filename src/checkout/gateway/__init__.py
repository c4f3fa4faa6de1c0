"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeGateway for development and testing (default)
- PayWayGateway for production, selected with GATEWAY_ADAPTER=payway
"""

import os

from checkout.gateway.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, building it from the environment on first use."""
    global _current_gateway
    if _current_gateway is None:
        adapter = os.environ.get("GATEWAY_ADAPTER", "fake")
        if adapter == "fake":
            from checkout.gateway.fake_adapter import FakeGateway

            _current_gateway = FakeGateway()
        elif adapter == "payway":
            from checkout.config import load_payment_config
            from checkout.gateway.payway_adapter import PayWayGateway

            _current_gateway = PayWayGateway(load_payment_config())
        else:
            raise ValueError(f"Unknown gateway adapter: {adapter}")
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
