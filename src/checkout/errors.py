"""Checkout failure taxonomy.

A gateway decline is not listed here: it is a normal ``ChargeOutcome`` and
results in a ``Declined`` order.
"""


class CheckoutError(Exception):
    """Base class for failures raised by checkout pipeline stages."""


class MissingToken(CheckoutError):
    """No usable single-use payment token was supplied. No external call was made."""


class GatewayUnavailable(CheckoutError):
    """Transport, timeout, auth or protocol failure talking to the processor."""


class PersistenceError(CheckoutError):
    """The order write failed, possibly after the charge was approved."""


class EffectError(CheckoutError):
    """A post-commit effect failed. Logged, never surfaced to the customer."""

    def __init__(self, effect: str, message: str) -> None:
        super().__init__(f"{effect}: {message}")
        self.effect = effect
        self.message = message


class InvalidOrderDetails(CheckoutError):
    """The cart or customer details cannot form an Order. Raised before any charge."""
