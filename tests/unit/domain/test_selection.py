"""Unit tests for selections."""

from __future__ import annotations

import pytest

from vidi_frontend.domain import InMemorySelectionRepository, Selection
from vidi_frontend.kernel.errors import NotFoundError


class TestInMemorySelectionRepository:
    def test_find_by_uid(self, selections: InMemorySelectionRepository) -> None:
        selection = selections.find_by_uid(7)
        assert selection is not None
        assert selection.data_type == "fe_users"

    def test_missing_returns_none(self, selections: InMemorySelectionRepository) -> None:
        assert selections.find_by_uid(1) is None

    def test_get_or_raise(self, selections: InMemorySelectionRepository) -> None:
        assert selections.get_or_raise(8).query == '[{"text": "john"}]'
        with pytest.raises(NotFoundError):
            selections.get_or_raise(1)

    def test_add_replaces(self) -> None:
        repository = InMemorySelectionRepository()
        repository.add(Selection(uid=1, data_type="t", query="[]"))
        repository.add(Selection(uid=1, data_type="t", query='[{"a": 1}]', name="A"))
        assert repository.get_or_raise(1).name == "A"
