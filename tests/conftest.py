"""Shared fixtures: a small fe_users / fe_groups schema."""

from __future__ import annotations

from typing import Any

import pytest

from vidi_frontend.config.settings import FrontendSettings
from vidi_frontend.domain import InMemorySelectionRepository, Selection
from vidi_frontend.localization import CatalogTranslator
from vidi_frontend.persistence import MatcherFactory
from vidi_frontend.signals import SignalDispatcher
from vidi_frontend.tca import TcaRegistry

USERGROUP_LABEL = "LLL:EXT:vidi/Resources/Private/Language/fe_users.xlf:usergroup"


def make_tables() -> dict[str, dict[str, Any]]:
    return {
        "fe_users": {
            "ctrl": {
                "title": "LLL:EXT:core/locallang.xlf:fe_users",
                "label": "username",
                "default_sortby": "ORDER BY username ASC, uid DESC",
            },
            "columns": {
                "username": {"label": "Username", "config": {"type": "input"}},
                "email": {"label": "Email", "config": {"type": "input"}},
                "status": {"config": {"type": "input"}},
                "title": {"label": "Title", "config": {"type": "input"}},
                "age": {"config": {"type": "input", "eval": "trim,int"}},
                "price": {"config": {"type": "number"}},
                "usergroup": {
                    "label": "Groups",
                    "config": {"type": "select", "foreign_table": "fe_groups"},
                },
                "image": {"config": {"type": "group", "allowed": "sys_file"}},
            },
            "grid": {
                "columns": {
                    "username": {"label": "User"},
                    "email": {},
                    "usergroup": {"label": "Groups (backend)"},
                },
                "facets": ["username", "usergroup"],
            },
        },
        "fe_groups": {
            "ctrl": {"title": "Groups", "label": "title", "sortby": "sorting"},
            "columns": {
                "title": {"label": "Title", "config": {"type": "input"}},
                "subgroup": {"config": {"type": "select", "foreign_table": "fe_groups"}},
            },
        },
    }


@pytest.fixture()
def translator() -> CatalogTranslator:
    return CatalogTranslator({USERGROUP_LABEL: "User groups"})


@pytest.fixture()
def registry(translator: CatalogTranslator) -> TcaRegistry:
    return TcaRegistry(make_tables(), translator=translator)


@pytest.fixture()
def selections() -> InMemorySelectionRepository:
    return InMemorySelectionRepository(
        [
            Selection(uid=7, data_type="fe_users", query='[{"usergroup": "2"}, {"email": "example.org"}]'),
            Selection(uid=8, data_type="fe_users", query='[{"text": "john"}]'),
        ]
    )


@pytest.fixture()
def dispatcher() -> SignalDispatcher:
    return SignalDispatcher()


@pytest.fixture()
def factory(
    registry: TcaRegistry,
    selections: InMemorySelectionRepository,
    dispatcher: SignalDispatcher,
) -> MatcherFactory:
    return MatcherFactory(
        FrontendSettings(),
        registry,
        selection_repository=selections,
        dispatcher=dispatcher,
    )
