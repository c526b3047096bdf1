"""Domain – saved selections and their repository port."""
from __future__ import annotations

import abc
import dataclasses

from vidi_frontend.kernel.errors import NotFoundError


@dataclasses.dataclass(frozen=True)
class Selection:
    """A saved visual-search query.

    ``query`` holds the JSON list of single-key objects produced by the
    visual search, e.g. ``'[{"usergroup": "2"}, {"text": "john"}]'``.
    """
    uid: int
    data_type: str
    query: str
    name: str = ""


class SelectionRepository(abc.ABC):
    """Port: keyed lookup of saved selections."""

    @abc.abstractmethod
    def find_by_uid(self, uid: int) -> Selection | None: ...

    def get_or_raise(self, uid: int) -> Selection:
        selection = self.find_by_uid(uid)
        if selection is None:
            raise NotFoundError("Selection", uid)
        return selection


class InMemorySelectionRepository(SelectionRepository):
    """Dict-backed repository for tests and static setups."""

    def __init__(self, selections: list[Selection] | None = None) -> None:
        self._selections: dict[int, Selection] = {}
        for selection in selections or []:
            self.add(selection)

    def add(self, selection: Selection) -> None:
        self._selections[selection.uid] = selection

    def find_by_uid(self, uid: int) -> Selection | None:
        return self._selections.get(uid)


__all__ = ["InMemorySelectionRepository", "Selection", "SelectionRepository"]
