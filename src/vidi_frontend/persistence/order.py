"""Persistence – Order value object."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Mapping


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class Order:
    """Ordered ``field -> direction`` mapping handed to the query executor."""
    orderings: dict[str, SortDirection] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, orderings: Mapping[str, str]) -> Order:
        return cls({field: SortDirection(direction.upper()) for field, direction in orderings.items()})

    def get_orderings(self) -> dict[str, SortDirection]:
        return dict(self.orderings)


__all__ = ["Order", "SortDirection"]
