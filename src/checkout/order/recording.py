"""Order recording — persists the outcome of a completed gateway interaction.

By the time an order is recorded the external charge has already happened
(or been declined). A failed write therefore leaves money moved with no local
record; the recorder reports it as ``PersistenceError`` and leaves the
reconciliation decision to the caller.

``prepare`` builds the same Order from the cart and customer details before
the charge, so input the aggregate would reject is caught while no money has
moved.
"""

from decimal import InvalidOperation

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from checkout.errors import InvalidOrderDetails, PersistenceError
from checkout.gateway.port import ChargeOutcome, ChargeRequest, format_amount
from checkout.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)

PENDING_PAYMENT_ID = "pending"


class OrderRecorder:
    def __init__(self, gateway_name: str) -> None:
        self.gateway_name = gateway_name

    def prepare(self, cart, customer, comment=None) -> None:
        """Check that ``cart`` and ``customer`` make a valid Order.

        Raises:
            InvalidOrderDetails: when the aggregate rejects the details. The
                order is built in memory only; nothing is persisted.
        """
        try:
            self._build(
                cart,
                customer,
                comment,
                payment_id=PENDING_PAYMENT_ID,
                payment_message="",
                status=OrderStatus.PAID.value,
                total=float(format_amount(cart.total)),
            )
        except (ValidationError, InvalidOperation, TypeError, ValueError) as exc:
            logger.info("Checkout rejected: order details invalid", error=str(exc))
            raise InvalidOrderDetails(str(exc)) from exc

    def record(self, charge: ChargeRequest, outcome: ChargeOutcome, cart, customer, comment=None) -> Order:
        """Build and persist an Order for ``outcome``.

        The recorded total is the amount that was sent to the gateway, so what
        was charged and what is stored cannot diverge.
        """
        status = OrderStatus.PAID.value if outcome.approved else OrderStatus.DECLINED.value
        try:
            order = self._build(
                cart,
                customer,
                comment,
                payment_id=outcome.transaction_id,
                payment_message=outcome.message,
                status=status,
                total=float(charge.principal_amount),
            )
            current_domain.repository_for(Order).add(order)
        except Exception as exc:
            raise PersistenceError(str(exc)) from exc

        logger.info(
            "Order recorded",
            order_id=str(order.id),
            payment_id=order.payment_id,
            status=order.status,
            total=order.total,
        )
        return order

    def _build(self, cart, customer, comment, payment_id, payment_message, status, total) -> Order:
        return Order.record(
            payment_id=payment_id,
            payment_gateway=self.gateway_name,
            payment_message=payment_message,
            status=status,
            total=total,
            shipping=cart.shipping,
            item_count=cart.item_count,
            product_count=cart.product_count,
            customer_id=customer.customer_id,
            customer=customer.snapshot(),
            comment=comment,
            products=[line.to_dict() for line in cart.lines],
        )
