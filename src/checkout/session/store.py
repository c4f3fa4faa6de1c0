"""Session/cart state — port and in-memory adapter.

The checkout pipeline only ever clears a cart through this port. Reading the
cart into a CheckoutRequest and flashing the resulting SessionOutcome belong
to the web layer, which uses the same store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from checkout.pipeline.outcome import SessionOutcome
from checkout.pipeline.request import CartSnapshot, CustomerDetails


@dataclass
class CartSession:
    session_id: str
    cart: CartSnapshot | None
    customer: CustomerDetails | None = None
    comment: str = ""


class SessionStore(ABC):
    @abstractmethod
    def get(self, session_id: str) -> CartSession | None: ...

    @abstractmethod
    def save(self, session: CartSession) -> None: ...

    @abstractmethod
    def empty_cart(self, session_id: str) -> None:
        """Remove the cart from the session, keeping the customer details."""
        ...

    @abstractmethod
    def store_outcome(self, session_id: str, outcome: SessionOutcome) -> None: ...

    @abstractmethod
    def pop_outcome(self, session_id: str) -> SessionOutcome | None:
        """Return the flashed outcome once, then forget it."""
        ...


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self.sessions: dict[str, CartSession] = {}
        self.outcomes: dict[str, SessionOutcome] = {}

    def get(self, session_id: str) -> CartSession | None:
        return self.sessions.get(session_id)

    def save(self, session: CartSession) -> None:
        self.sessions[session.session_id] = session

    def empty_cart(self, session_id: str) -> None:
        session = self.sessions.get(session_id)
        if session is not None:
            session.cart = None

    def store_outcome(self, session_id: str, outcome: SessionOutcome) -> None:
        self.outcomes[session_id] = outcome

    def pop_outcome(self, session_id: str) -> SessionOutcome | None:
        return self.outcomes.pop(session_id, None)
