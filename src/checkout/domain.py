"""Checkout bounded context — Payment transaction orchestration.

Turns a submitted cart and a single-use payment token into a recorded order
with a definitive outcome. Owns the gateway abstraction, the Order aggregate,
the order search index and the post-commit effects (indexing, email, cart
reset) that follow a recorded order.
"""

import structlog
from protean.domain import Domain

checkout = Domain(name="checkout")

logger = structlog.get_logger(__name__)
