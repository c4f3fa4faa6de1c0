"""PayWay REST payment gateway adapter.

Posts one form-encoded transaction per checkout attempt, authenticating with
the secret API key as the basic-auth username, and normalizes the JSON reply
into a ChargeOutcome. Nothing is retried: a second charge with the same token
would either be rejected by PayWay or bill the customer twice.
"""

import httpx
import structlog

from checkout.config import PaymentConfig
from checkout.errors import GatewayUnavailable
from checkout.gateway.port import ChargeOutcome, ChargeRequest, ChargeStatus, PaymentGateway

logger = structlog.get_logger(__name__)

DECLINED_STATUS = "declined"


class PayWayGateway(PaymentGateway):
    """Production PayWay adapter."""

    name = "PayWay"

    def __init__(self, config: PaymentConfig, client: httpx.Client | None = None) -> None:
        config.require_credentials()
        self.config = config
        self.client = client or httpx.Client(timeout=config.timeout_seconds)

    def create_charge(self, request: ChargeRequest) -> ChargeOutcome:
        try:
            response = self.client.post(
                self.config.api_url,
                data=request.to_form(),
                auth=(self.config.api_key, ""),
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            logger.error(
                "PayWay request failed",
                customer_number=request.customer_number,
                error=str(exc),
            )
            raise GatewayUnavailable(str(exc)) from exc
        except ValueError as exc:
            logger.error(
                "PayWay returned an unparsable body",
                customer_number=request.customer_number,
                error=str(exc),
            )
            raise GatewayUnavailable("Unparsable gateway response") from exc

        return parse_transaction(body)


def parse_transaction(body) -> ChargeOutcome:
    """Map a PayWay transaction body to a ChargeOutcome.

    ``declined`` is the only negative status; any other status carrying a
    transaction id counts as approved.
    """
    if not isinstance(body, dict):
        raise GatewayUnavailable("Gateway response is not a JSON object")

    transaction_id = body.get("transactionId")
    status = body.get("status")
    if transaction_id in (None, "") or not status:
        raise GatewayUnavailable("Gateway response missing status or transactionId")

    charge_status = ChargeStatus.DECLINED if str(status).lower() == DECLINED_STATUS else ChargeStatus.APPROVED
    if charge_status == ChargeStatus.DECLINED:
        logger.warning("PayWay declined transaction", transaction_id=str(transaction_id), body=body)

    return ChargeOutcome(
        status=charge_status,
        transaction_id=str(transaction_id),
        response_code=str(body.get("responseCode", "")),
        response_text=str(body.get("responseText", "")),
    )
