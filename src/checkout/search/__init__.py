"""Order index registry.

Provides get_order_index() / set_order_index() so tests can swap in an index
that fails or records calls.
"""

from checkout.search.order_search import OrderIndex

_order_index: OrderIndex | None = None


def get_order_index() -> OrderIndex:
    global _order_index
    if _order_index is None:
        _order_index = OrderIndex()
    return _order_index


def set_order_index(index: OrderIndex) -> None:
    global _order_index
    _order_index = index


def reset_order_index() -> None:
    global _order_index
    _order_index = None
