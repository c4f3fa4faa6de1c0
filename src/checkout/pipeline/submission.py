"""Checkout submission — the payment transaction orchestrator.

Flow (each step only runs if the previous one produced a usable result):
    1. Token validation     → MissingToken short-circuits, no gateway call
    2. Order details check  → InvalidOrderDetails short-circuits, no gateway call
    3. Gateway charge       → GatewayUnavailable short-circuits, no order
    4. Order recording      → PersistenceError short-circuits; if the charge
                              was approved the attempt is flagged for
                              reconciliation, never compensated here
    5. Post-commit effects  → failures are logged and reported only
    6. Outcome resolution   → redirect target + SessionOutcome

No step is retried. A customer whose attempt failed re-submits with a fresh
single-use token.
"""

from dataclasses import dataclass, field

import structlog

from checkout.config import PaymentConfig, load_payment_config
from checkout.errors import GatewayUnavailable, InvalidOrderDetails, MissingToken, PersistenceError
from checkout.gateway import get_gateway
from checkout.gateway.port import ChargeRequest, PaymentGateway
from checkout.order.recording import OrderRecorder
from checkout.pipeline.effects import EffectReport, PostCommitEffects
from checkout.pipeline.outcome import Resolution, SessionOutcome, resolve_outcome
from checkout.pipeline.request import CheckoutRequest
from checkout.pipeline.validation import validate_token

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    redirect_target: str
    outcome: SessionOutcome
    resolution: Resolution
    order_id: str | None = None
    requires_reconciliation: bool = False
    effects: list[EffectReport] = field(default_factory=list)


class CheckoutPipeline:
    def __init__(
        self,
        gateway: PaymentGateway | None = None,
        effects: PostCommitEffects | None = None,
        config: PaymentConfig | None = None,
    ) -> None:
        self.gateway = gateway or get_gateway()
        self.effects = effects
        self.config = config or load_payment_config()
        self.recorder = OrderRecorder(gateway_name=self.gateway.name)

    def submit_checkout(self, request: CheckoutRequest) -> CheckoutResult:
        """Run one checkout attempt to a definitive, customer-visible result."""
        try:
            token = validate_token(request.single_use_token)
        except MissingToken:
            return self._resolve(Resolution.MISSING_TOKEN)

        try:
            self.recorder.prepare(request.cart, request.customer, request.comment)
        except InvalidOrderDetails:
            return self._resolve(Resolution.INVALID_DETAILS)

        charge = ChargeRequest.build(
            single_use_token=token,
            amount=request.cart.total,
            currency=self.config.currency,
            merchant_id=self.config.merchant_id,
        )
        with structlog.contextvars.bound_contextvars(customer_number=charge.customer_number):
            return self._charge_and_record(request, charge)

    def _charge_and_record(self, request: CheckoutRequest, charge: ChargeRequest) -> CheckoutResult:
        logger.info("Submitting charge", amount=charge.principal_amount, currency=charge.currency)
        try:
            outcome = self.gateway.create_charge(charge)
        except GatewayUnavailable as exc:
            logger.error("Payment gateway unavailable", error=str(exc))
            return self._resolve(Resolution.GATEWAY_UNAVAILABLE)

        try:
            order = self.recorder.record(charge, outcome, request.cart, request.customer, request.comment)
        except PersistenceError as exc:
            if outcome.approved:
                logger.critical(
                    "Charge approved but order not recorded; reconciliation required",
                    transaction_id=outcome.transaction_id,
                    amount=charge.principal_amount,
                    email=request.customer.email,
                    error=str(exc),
                )
            else:
                logger.error(
                    "Declined charge could not be recorded",
                    transaction_id=outcome.transaction_id,
                    error=str(exc),
                )
            return self._resolve(Resolution.PERSISTENCE_FAILED, requires_reconciliation=outcome.approved)

        effects = self.effects or PostCommitEffects()
        reports = effects.dispatch(order, request.session_id)

        resolution = Resolution.PAID if order.is_paid else Resolution.DECLINED
        if resolution == Resolution.DECLINED:
            logger.warning("Payment declined", order_id=str(order.id), payment_message=order.payment_message)
        return self._resolve(
            resolution,
            order_id=str(order.id),
            transaction_id=order.payment_id,
            email=order.customer.email if order.customer else None,
            effects=reports,
        )

    @staticmethod
    def _resolve(
        resolution: Resolution,
        order_id: str | None = None,
        transaction_id: str | None = None,
        email: str | None = None,
        effects: list[EffectReport] | None = None,
        requires_reconciliation: bool = False,
    ) -> CheckoutResult:
        redirect_target, outcome = resolve_outcome(resolution, order_id, transaction_id, email)
        return CheckoutResult(
            redirect_target=redirect_target,
            outcome=outcome,
            resolution=resolution,
            order_id=order_id,
            requires_reconciliation=requires_reconciliation,
            effects=effects or [],
        )


def submit_checkout(request: CheckoutRequest) -> CheckoutResult:
    """Submit a checkout with the currently configured gateway and adapters."""
    return CheckoutPipeline().submit_checkout(request)
