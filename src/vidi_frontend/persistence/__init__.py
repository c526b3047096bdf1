"""Persistence – matcher and order construction."""
from vidi_frontend.persistence.matcher import Constraint, Matcher, Operator
from vidi_frontend.persistence.matcher_factory import MatcherFactory
from vidi_frontend.persistence.order import Order, SortDirection
from vidi_frontend.persistence.order_factory import OrderFactory
from vidi_frontend.persistence.query import QueryFragment

__all__ = [
    "Constraint",
    "Matcher",
    "MatcherFactory",
    "Operator",
    "Order",
    "OrderFactory",
    "QueryFragment",
    "SortDirection",
]
