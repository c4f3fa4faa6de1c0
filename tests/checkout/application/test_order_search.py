"""Application tests for the order search index."""

from checkout.order.order import Order, OrderStatus
from checkout.search import get_order_index, reset_order_index, set_order_index
from checkout.search.order_search import OrderIndex, OrderSearchEntry, keywords_for
from protean import current_domain


def _add_order(payment_id, email, last_name, status=OrderStatus.PAID.value):
    order = Order.record(
        payment_id=payment_id,
        payment_gateway="FakeGateway",
        payment_message="00 - Approved",
        status=status,
        total=10.0,
        customer={"email": email, "first_name": "Sam", "last_name": last_name, "postcode": "3000"},
    )
    current_domain.repository_for(Order).add(order)
    return order


class TestKeywords:
    def test_keywords_are_lower_cased(self):
        order = _add_order("TXN-A", "Sam@Example.com", "Nguyen")
        keywords = keywords_for(order)
        assert "sam@example.com" in keywords
        assert "nguyen" in keywords
        assert "txn-a" in keywords
        assert "paid" in keywords


class TestReindex:
    def test_reindex_creates_one_entry_per_order(self):
        _add_order("TXN-A", "a@example.com", "Able")
        _add_order("TXN-B", "b@example.com", "Baker")

        count = OrderIndex().reindex_orders()

        entries = current_domain.repository_for(OrderSearchEntry)._dao.query.all().items
        assert count == 2
        assert len(entries) == 2

    def test_reindex_twice_does_not_duplicate(self):
        _add_order("TXN-A", "a@example.com", "Able")
        index = OrderIndex()

        index.reindex_orders()
        index.reindex_orders()

        entries = current_domain.repository_for(OrderSearchEntry)._dao.query.all().items
        assert len(entries) == 1


class TestSearch:
    def test_search_by_email(self):
        order = _add_order("TXN-A", "a@example.com", "Able")
        _add_order("TXN-B", "b@example.com", "Baker")
        index = OrderIndex()
        index.reindex_orders()

        assert index.search_orders("a@example.com") == [str(order.id)]

    def test_search_matches_every_word(self):
        _add_order("TXN-A", "a@example.com", "Able", status=OrderStatus.DECLINED.value)
        paid = _add_order("TXN-B", "b@example.com", "Able")
        index = OrderIndex()
        index.reindex_orders()

        assert index.search_orders("able paid") == [str(paid.id)]

    def test_blank_term_returns_nothing(self):
        _add_order("TXN-A", "a@example.com", "Able")
        index = OrderIndex()
        index.reindex_orders()
        assert index.search_orders("  ") == []

    def test_unindexed_orders_are_not_found(self):
        _add_order("TXN-A", "a@example.com", "Able")
        assert OrderIndex().search_orders("able") == []


class TestOrderIndexRegistry:
    def test_default_index(self):
        reset_order_index()
        assert isinstance(get_order_index(), OrderIndex)

    def test_set_index_overrides(self):
        custom = OrderIndex()
        set_order_index(custom)
        assert get_order_index() is custom
