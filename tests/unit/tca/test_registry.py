"""Unit tests for TcaRegistry and the recursive merge."""

from __future__ import annotations

import pytest

from vidi_frontend.kernel.errors import InvalidKeyError
from vidi_frontend.localization import NullTranslator
from vidi_frontend.tca import FrontendGridService, TcaRegistry, merge_recursive_with_overrule


class TestMergeRecursiveWithOverrule:
    def test_nested_merge(self) -> None:
        base = {"a": {"x": 1, "y": {"k": 1}}, "b": 2}
        override = {"a": {"y": {"k": 2, "l": 3}, "z": 4}, "c": 5}
        assert merge_recursive_with_overrule(base, override) == {
            "a": {"x": 1, "y": {"k": 2, "l": 3}, "z": 4},
            "b": 2,
            "c": 5,
        }

    def test_non_mapping_replaces(self) -> None:
        assert merge_recursive_with_overrule({"a": {"x": 1}}, {"a": [1]}) == {"a": [1]}
        assert merge_recursive_with_overrule({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_inputs_are_not_mutated(self) -> None:
        base = {"a": {"x": 1}}
        override = {"a": {"y": 2}}
        merge_recursive_with_overrule(base, override)
        assert base == {"a": {"x": 1}}
        assert override == {"a": {"y": 2}}

    def test_key_order(self) -> None:
        merged = merge_recursive_with_overrule({"a": 1, "b": 2}, {"c": 3, "a": 4})
        assert list(merged) == ["a", "b", "c"]


class TestTcaRegistry:
    def test_default_translator(self) -> None:
        assert isinstance(TcaRegistry().translator, NullTranslator)

    def test_unknown_table_raises(self, registry) -> None:
        assert not registry.has_table("nope")
        with pytest.raises(InvalidKeyError):
            registry.table("nope")

    def test_table_names(self, registry) -> None:
        assert registry.table_names == ["fe_users", "fe_groups"]

    def test_services_are_cached(self, registry) -> None:
        assert registry.table("fe_users") is registry.table("fe_users")
        assert registry.grid("fe_users") is registry.grid("fe_users")
        assert registry.frontend_grid("fe_users") is registry.frontend_grid("fe_users")

    def test_override_invalidates_services(self, registry) -> None:
        grid = registry.frontend_grid("fe_users")
        registry.register_override("fe_users", {"grid_frontend": {"facets": ["email"]}})
        fresh = registry.frontend_grid("fe_users")
        assert fresh is not grid
        assert fresh.has_facet("email")

    def test_registered_configuration_is_copied(self) -> None:
        configuration = {"columns": {"a": {}}}
        registry = TcaRegistry({"t": configuration})
        registry.register_override("t", {"columns": {"b": {}}})
        assert configuration == {"columns": {"a": {}}}

    def test_repeated_initialization_is_idempotent(self, registry) -> None:
        first = list(registry.frontend_grid("fe_users").get_fields())
        # Build a second service over the already initialized configuration.
        second = FrontendGridService("fe_users", registry)
        assert list(second.get_fields()) == first
        assert registry.get_configuration("fe_users")["grid_frontend"]["columns"] == {
            "__buttons": {"renderer": "ShowButtonRenderer"}
        }
