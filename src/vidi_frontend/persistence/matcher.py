"""Persistence – Matcher and Constraint value objects."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Mapping


class Operator(str, Enum):
    EQUALS = "equals"
    LIKE = "like"


@dataclasses.dataclass(frozen=True)
class Constraint:
    """A single ``(field, operator, value)`` criterion."""
    field: str
    operator: Operator
    value: Any


class Matcher:
    """Accumulated filter specification for a query against one data type.

    A matcher is created per request, refined by each input source and
    handed once to the query executor.

    Example::

        matcher = Matcher(data_type="fe_users")
        matcher.equals("usergroup", "3").like("email", "example.org")
        matcher.set_search_term("john")
    """

    def __init__(self, matches: Mapping[str, Any] | None = None, data_type: str = "") -> None:
        self.data_type = data_type
        self.search_term: str | None = None
        self._constraints: list[Constraint] = []
        for field, value in (matches or {}).items():
            self.equals(field, value)

    def equals(self, field: str, value: Any) -> Matcher:
        self._constraints.append(Constraint(field, Operator.EQUALS, value))
        return self

    def like(self, field: str, value: Any) -> Matcher:
        self._constraints.append(Constraint(field, Operator.LIKE, value))
        return self

    def set_search_term(self, search_term: str) -> Matcher:
        self.search_term = search_term
        return self

    @property
    def constraints(self) -> list[Constraint]:
        return list(self._constraints)

    def get_equals_criteria(self) -> list[Constraint]:
        return [c for c in self._constraints if c.operator is Operator.EQUALS]

    def get_like_criteria(self) -> list[Constraint]:
        return [c for c in self._constraints if c.operator is Operator.LIKE]

    def __repr__(self) -> str:
        return (
            f"Matcher(data_type={self.data_type!r}, "
            f"constraints={self._constraints!r}, search_term={self.search_term!r})"
        )


__all__ = ["Constraint", "Matcher", "Operator"]
