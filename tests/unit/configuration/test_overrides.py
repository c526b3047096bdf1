"""Unit tests for the shipped table overrides."""

from __future__ import annotations

from vidi_frontend.configuration import FE_USERS_OVERRIDE, apply_default_overrides
from vidi_frontend.tca import TcaRegistry


class TestApplyDefaultOverrides:
    def test_fe_users_receives_override(self, registry) -> None:
        assert apply_default_overrides(registry) == ["fe_users"]
        columns = registry.get_configuration("fe_users")["grid_frontend"]["columns"]
        assert columns["usergroup"]["renderers"] == ["RelationRenderer"]
        assert columns["__buttons"] == {"renderer": "ShowButtonRenderer"}

    def test_existing_configuration_is_kept(self, registry) -> None:
        apply_default_overrides(registry)
        configuration = registry.get_configuration("fe_users")
        assert "grid" in configuration
        assert "username" in configuration["columns"]

    def test_absent_table_is_ignored(self) -> None:
        assert apply_default_overrides(TcaRegistry({"pages": {}})) == []

    def test_override_constant_is_not_mutated(self, registry) -> None:
        apply_default_overrides(registry)
        registry.frontend_grid("fe_users").get_fields()
        assert set(FE_USERS_OVERRIDE["grid_frontend"]["columns"]) == {"usergroup", "__buttons"}

    def test_idempotent(self, registry) -> None:
        apply_default_overrides(registry)
        first = registry.frontend_grid("fe_users").get_fields()
        apply_default_overrides(registry)
        assert registry.frontend_grid("fe_users").get_fields() == first
