"""Order search index — keyword records rebuilt from the order store.

Every recorded order gets one OrderSearchEntry whose ``keywords`` field holds
the lower-cased id, email, names, postcode, status and payment id. The index
is refreshed after each recorded order and is best effort: a stale or failed
refresh never affects the order itself.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.order.order import Order

PAGE_SIZE = 100


@checkout.projection
class OrderSearchEntry:
    order_id = Identifier(identifier=True, required=True)
    keywords = String(max_length=4000)
    email = String(max_length=254)
    status = String(max_length=20)
    indexed_at = DateTime()


def _all_records(repo) -> list:
    records = []
    offset = 0
    while True:
        page = repo._dao.query.offset(offset).limit(PAGE_SIZE).all().items
        records.extend(page)
        if len(page) < PAGE_SIZE:
            return records
        offset += PAGE_SIZE


def keywords_for(order: Order) -> str:
    customer = order.customer
    parts = [str(order.id), order.payment_id, order.status]
    if customer is not None:
        parts += [customer.email, customer.first_name, customer.last_name, customer.postcode]
    return " ".join(str(part).lower() for part in parts if part)


class OrderIndex:
    """Search index over recorded orders backed by the OrderSearchEntry projection."""

    def reindex_orders(self) -> int:
        """Rebuild the index from every stored order. Returns the entry count."""
        index_repo = current_domain.repository_for(OrderSearchEntry)
        orders = _all_records(current_domain.repository_for(Order))

        for entry in _all_records(index_repo):
            index_repo._dao.delete(entry)

        now = datetime.now(UTC)
        for order in orders:
            index_repo.add(
                OrderSearchEntry(
                    order_id=str(order.id),
                    keywords=keywords_for(order),
                    email=order.customer.email if order.customer else None,
                    status=order.status,
                    indexed_at=now,
                )
            )
        return len(orders)

    def search_orders(self, term: str) -> list[str]:
        """Return ids of orders whose keywords contain every word of ``term``."""
        words = [word for word in (term or "").lower().split() if word]
        if not words:
            return []
        entries = _all_records(current_domain.repository_for(OrderSearchEntry))
        return [str(entry.order_id) for entry in entries if all(word in (entry.keywords or "") for word in words)]
