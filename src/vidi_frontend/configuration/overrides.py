"""Configuration – front-end grid overrides shipped with the package."""
from __future__ import annotations

from typing import Any

from vidi_frontend.tca import SHOW_BUTTON_RENDERER, TcaRegistry

RELATION_RENDERER = "RelationRenderer"

FE_USERS_OVERRIDE: dict[str, Any] = {
    "grid_frontend": {
        "columns": {
            # Overrides the "usergroup" column of the backend grid.
            "usergroup": {
                "renderers": [RELATION_RENDERER],
                "label": "LLL:EXT:vidi/Resources/Private/Language/fe_users.xlf:usergroup",
            },
            "__buttons": {
                "renderer": SHOW_BUTTON_RENDERER,
            },
        },
    },
}

DEFAULT_OVERRIDES: dict[str, dict[str, Any]] = {
    "fe_users": FE_USERS_OVERRIDE,
}


def apply_default_overrides(registry: TcaRegistry) -> list[str]:
    """Merge the shipped overrides into every registered table they target.

    Returns the names of the tables that received an override.
    """
    applied = []
    for table_name, override in DEFAULT_OVERRIDES.items():
        if registry.has_table(table_name):
            registry.register_override(table_name, override)
            applied.append(table_name)
    return applied


__all__ = ["DEFAULT_OVERRIDES", "FE_USERS_OVERRIDE", "RELATION_RENDERER", "apply_default_overrides"]
