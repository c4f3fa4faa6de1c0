"""Token validation — the cheap reject before any network call."""

import structlog

from checkout.errors import MissingToken

logger = structlog.get_logger(__name__)


def validate_token(single_use_token: str | None) -> str:
    """Return the token exactly as supplied.

    The token is opaque to checkout; surrounding whitespace only counts
    towards deciding whether one was supplied at all.

    Raises:
        MissingToken: when the token is absent, empty or blank.
    """
    if not (single_use_token or "").strip():
        logger.info("Checkout rejected: no single use token")
        raise MissingToken("A single use payment token is required")
    return single_use_token
