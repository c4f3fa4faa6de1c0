import os

import pytest
from checkout.gateway import reset_gateway, set_gateway
from checkout.gateway.fake_adapter import FakeGateway
from checkout.notification import reset_email_sender, set_email_sender
from checkout.notification.fake_email import FakeEmailAdapter
from checkout.pipeline.request import CartLine, CartSnapshot, CheckoutRequest, CustomerDetails
from checkout.search import reset_order_index
from checkout.session import reset_session_store, set_session_store
from checkout.session.store import CartSession, InMemorySessionStore


@pytest.fixture(scope="session")
def _checkout_domain(request):
    """Initialize the checkout domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from checkout.domain import checkout

    checkout.init()
    return checkout


@pytest.fixture(autouse=True)
def run_around_tests(_checkout_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _checkout_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()

    reset_gateway()
    reset_email_sender()
    reset_order_index()
    reset_session_store()


@pytest.fixture()
def gateway():
    fake = FakeGateway()
    set_gateway(fake)
    return fake


@pytest.fixture()
def email_sender():
    fake = FakeEmailAdapter()
    set_email_sender(fake)
    return fake


@pytest.fixture()
def session_store():
    store = InMemorySessionStore()
    set_session_store(store)
    return store


@pytest.fixture()
def make_request():
    def _make(token="tok_123", total=49.95, session_id="sess-001", **overrides):
        cart = overrides.pop(
            "cart",
            CartSnapshot(
                total=total,
                shipping=5.0,
                item_count=3,
                product_count=2,
                lines=(
                    CartLine(product_id="prod-1", title="Coffee mug", quantity=2, total_item_price=29.95),
                    CartLine(product_id="prod-2", title="Tea towel", quantity=1, total_item_price=15.0),
                ),
            ),
        )
        customer = overrides.pop(
            "customer",
            CustomerDetails(
                email="jane@example.com",
                first_name="Jane",
                last_name="Citizen",
                address1="1 Market St",
                country="Australia",
                state="NSW",
                postcode="2000",
                phone="0400000000",
                customer_id="cust-001",
            ),
        )
        return CheckoutRequest(
            single_use_token=token,
            cart=cart,
            customer=customer,
            comment=overrides.pop("comment", "Leave at the door"),
            session_id=session_id,
        )

    return _make


@pytest.fixture()
def stored_session(session_store, make_request):
    """A session holding the default cart, keyed by ``sess-001``."""
    request = make_request()
    session = CartSession(
        session_id="sess-001",
        cart=request.cart,
        customer=request.customer,
        comment=request.comment,
    )
    session_store.save(session)
    return session
