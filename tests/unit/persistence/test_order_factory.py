"""Unit tests for Order and OrderFactory."""

from __future__ import annotations

from vidi_frontend.persistence import Order, OrderFactory, SortDirection


class TestOrderFactory:
    def test_default_sortby(self, registry) -> None:
        order = OrderFactory(registry).get_order("fe_users")
        assert order.get_orderings() == {"username": SortDirection.ASC, "uid": SortDirection.DESC}
        assert list(order.get_orderings()) == ["username", "uid"]

    def test_sortby_column(self, registry) -> None:
        order = OrderFactory(registry).get_order("fe_groups")
        assert order.get_orderings() == {"sorting": SortDirection.ASC}

    def test_no_ordering(self, registry) -> None:
        registry.register_table("sys_note", {"ctrl": {}, "columns": {}})
        assert OrderFactory(registry).get_order("sys_note").get_orderings() == {}


class TestOrder:
    def test_from_mapping_normalises_case(self) -> None:
        order = Order.from_mapping({"title": "desc"})
        assert order.orderings == {"title": SortDirection.DESC}

    def test_get_orderings_returns_copy(self) -> None:
        order = Order.from_mapping({"title": "ASC"})
        order.get_orderings().clear()
        assert order.orderings == {"title": SortDirection.ASC}
