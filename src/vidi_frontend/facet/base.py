"""Facet – pluggable filter unit bound to a grid field."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vidi_frontend.persistence.matcher import Matcher


class Facet(abc.ABC):
    """Base class of every facet.

    A facet may take over constraint construction for its field: when
    :meth:`can_modify_matcher` returns ``True`` the matcher factory hands the
    value to :meth:`modify_matcher` instead of adding an equals/like
    constraint itself.

    Example::

        class GroupFacet(Facet):
            name = "usergroup"

            def can_modify_matcher(self) -> bool:
                return True

            def modify_matcher(self, matcher, value):
                return matcher.equals("usergroup.uid", value)
    """

    name: str = ""
    label: str = ""

    def can_modify_matcher(self) -> bool:
        return False

    def modify_matcher(self, matcher: Matcher, value: Any) -> Matcher:
        return matcher

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class StandardFacet(Facet):
    """Facet declared by name only; it offers suggestions but never
    rewrites the matcher."""

    def __init__(
        self,
        name: str,
        label: str = "",
        suggestions: dict[str, str] | None = None,
    ) -> None:
        self.name = name
        self.label = label or name
        self._suggestions = dict(suggestions or {})

    def get_suggestions(self) -> dict[str, str]:
        return dict(self._suggestions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StandardFacet):
            return NotImplemented
        return (self.name, self.label, self._suggestions) == (
            other.name,
            other.label,
            other._suggestions,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.name))


__all__ = ["Facet", "StandardFacet"]
