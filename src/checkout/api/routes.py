"""FastAPI routes for the Checkout domain — checkout submission and order views."""

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from checkout.api.schemas import (
    CheckoutResponse,
    OrderLineSchema,
    OrderResponse,
    OrderSearchResponse,
    SessionOutcomeSchema,
    SubmitCheckoutRequest,
)
from checkout.domain import checkout
from checkout.order.order import Order
from checkout.pipeline.request import CheckoutRequest
from checkout.pipeline.submission import CheckoutResult, submit_checkout
from checkout.search import get_order_index
from checkout.session import get_session_store

router = APIRouter(tags=["checkout"])


def _submit_in_worker(request: CheckoutRequest) -> CheckoutResult:
    # The gateway call blocks; worker threads need their own domain context.
    with checkout.domain_context():
        return submit_checkout(request)


@router.post("/checkout/confirm", response_model=CheckoutResponse)
async def confirm_checkout(body: SubmitCheckoutRequest) -> CheckoutResponse:
    """Charge the session's cart and record the order."""
    store = get_session_store()
    session = store.get(body.session_id)
    if session is None or session.cart is None or session.customer is None:
        raise HTTPException(status_code=400, detail="Cart is empty or checkout details are missing")

    result = await run_in_threadpool(
        _submit_in_worker,
        CheckoutRequest(
            single_use_token=body.single_use_token,
            cart=session.cart,
            customer=session.customer,
            comment=session.comment,
            session_id=body.session_id,
        ),
    )
    store.store_outcome(body.session_id, result.outcome)
    return CheckoutResponse(
        redirect_target=result.redirect_target,
        order_id=result.order_id,
        outcome=SessionOutcomeSchema(**result.outcome.to_dict()),
    )


@router.get("/payment/{order_id}", response_model=OrderResponse)
async def payment_result(order_id: str, session_id: str | None = None) -> OrderResponse:
    """Order confirmation view; shows the flashed outcome once per session."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found") from None

    outcome = get_session_store().pop_outcome(session_id) if session_id else None
    return OrderResponse(
        order_id=str(order.id),
        status=order.status,
        payment_id=order.payment_id,
        payment_gateway=order.payment_gateway,
        payment_message=order.payment_message,
        total=order.total,
        shipping=order.shipping or 0.0,
        email=order.customer.email if order.customer else None,
        products=[
            OrderLineSchema(
                product_id=line.product_id,
                title=line.title,
                quantity=line.quantity,
                total_item_price=line.total_item_price or 0.0,
            )
            for line in order.products
        ],
        outcome=SessionOutcomeSchema(**outcome.to_dict()) if outcome else None,
    )


@router.get("/orders/search", response_model=OrderSearchResponse)
async def search_orders(q: str = "") -> OrderSearchResponse:
    return OrderSearchResponse(order_ids=get_order_index().search_orders(q))
