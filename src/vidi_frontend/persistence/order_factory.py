"""Persistence – OrderFactory."""
from __future__ import annotations

from vidi_frontend.persistence.order import Order
from vidi_frontend.tca import TcaRegistry


class OrderFactory:
    """Build the default Order of a data type from its table configuration."""

    def __init__(self, registry: TcaRegistry) -> None:
        self._registry = registry

    def get_order(self, data_type: str) -> Order:
        return Order.from_mapping(self._registry.table(data_type).get_default_orderings())


__all__ = ["OrderFactory"]
