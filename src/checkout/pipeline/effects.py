"""Post-commit effects dispatcher.

Runs after an order is durably recorded. Effects run in a fixed order (index
refresh, cart reset, notification) and each one is isolated: a failure is
logged and reported, and the next effect still runs. No effect writes to the
order, so dispatching twice leaves it unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from checkout.errors import EffectError
from checkout.notification import get_email_sender
from checkout.notification.payment_result import PaymentResultTemplate
from checkout.order.order import Order
from checkout.pipeline.outcome import MESSAGE_DECLINED, MESSAGE_SUCCESS
from checkout.search import get_order_index
from checkout.session import get_session_store

logger = structlog.get_logger(__name__)

REINDEX = "reindex_orders"
CLEAR_CART = "clear_cart"
NOTIFY = "notify_customer"


@dataclass(frozen=True)
class EffectReport:
    name: str
    succeeded: bool
    error: str | None = None


class PostCommitEffects:
    def __init__(self, order_index=None, email_sender=None, session_store=None) -> None:
        self.order_index = order_index or get_order_index()
        self.email_sender = email_sender or get_email_sender()
        self.session_store = session_store or get_session_store()

    def effects_for(self, order: Order, session_id: str | None) -> list[tuple[str, Callable[[], None]]]:
        effects = [(REINDEX, self.order_index.reindex_orders)]
        if order.is_paid and session_id:
            effects.append((CLEAR_CART, lambda: self.session_store.empty_cart(session_id)))
        effects.append((NOTIFY, lambda: self.notify(order)))
        return effects

    def dispatch(self, order: Order, session_id: str | None = None) -> list[EffectReport]:
        reports = []
        for name, effect in self.effects_for(order, session_id):
            try:
                effect()
            except Exception as exc:
                logger.warning(
                    "Post-commit effect failed",
                    effect=name,
                    order_id=str(order.id),
                    error=str(exc),
                    exc_info=True,
                )
                reports.append(EffectReport(name=name, succeeded=False, error=str(exc)))
            else:
                reports.append(EffectReport(name=name, succeeded=True))
        return reports

    def notify(self, order: Order) -> None:
        address = order.customer.email if order.customer else None
        if not address:
            raise EffectError(NOTIFY, "Order has no email address")

        content = PaymentResultTemplate.render(
            {
                "message": MESSAGE_SUCCESS if order.is_paid else MESSAGE_DECLINED,
                "status": order.status,
                "order_id": str(order.id),
                "transaction_id": order.payment_id,
            }
        )
        result = self.email_sender.send(to=address, subject=content["subject"], html_body=content["html_body"])
        if result.get("status") != "sent":
            raise EffectError(NOTIFY, result.get("error", "Unknown dispatch error"))

        logger.info("Payment email sent", order_id=str(order.id), message_id=result.get("message_id"))
