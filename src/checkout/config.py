"""Payment configuration loaded from the environment."""

import os
from dataclasses import dataclass

DEFAULT_PAYWAY_URL = "https://api.payway.com.au/rest/v1/transactions"


class PaymentConfigError(Exception):
    """Raised when a gateway adapter is requested without its credentials."""


@dataclass(frozen=True)
class PaymentConfig:
    api_url: str
    api_key: str
    merchant_id: str
    currency: str = "aud"
    timeout_seconds: float = 10.0
    gateway_name: str = "PayWay"

    def require_credentials(self) -> None:
        missing = [name for name in ("api_key", "merchant_id") if not getattr(self, name)]
        if missing:
            raise PaymentConfigError(f"Missing payment configuration: {', '.join(missing)}")


def load_payment_config() -> PaymentConfig:
    return PaymentConfig(
        api_url=os.environ.get("PAYWAY_API_URL", DEFAULT_PAYWAY_URL),
        api_key=os.environ.get("PAYWAY_API_KEY", ""),
        merchant_id=os.environ.get("PAYWAY_MERCHANT_ID", ""),
        currency=os.environ.get("PAYWAY_CURRENCY", "aud"),
        timeout_seconds=float(os.environ.get("PAYWAY_TIMEOUT_SECONDS", "10")),
    )


def cart_title() -> str:
    """Shop title used in customer-facing email subjects."""
    return os.environ.get("CART_TITLE", "expressCart")
