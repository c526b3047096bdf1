"""TCA – per data type configuration registry.

The registry owns the raw table configuration (``ctrl``, ``columns``,
``grid``, ``grid_frontend``) of every data type. It is filled during an
initialization phase and then handed by reference to the factories; the
table and grid services derived from it are created lazily on first access
and cached.
"""
from __future__ import annotations

import copy
from typing import Any, Callable, Mapping, TypeVar

from vidi_frontend.kernel.errors import InvalidKeyError
from vidi_frontend.localization import NullTranslator, Translator
from vidi_frontend.observability.logging import get_logger
from vidi_frontend.tca.frontend_grid import FrontendGridService
from vidi_frontend.tca.grid import GridService
from vidi_frontend.tca.table import TableService

_log = get_logger(__name__)

S = TypeVar("S")


def merge_recursive_with_overrule(
    original: Mapping[str, Any], overrule: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a deep copy of *original* with *overrule* merged into it.

    Nested mappings are merged key by key; any other value of *overrule*
    replaces the original one. New keys are appended after existing ones.
    """
    merged = copy.deepcopy(dict(original))
    for key, value in overrule.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_recursive_with_overrule(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class TcaRegistry:
    """Holds table configuration and the services built on top of it."""

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, Any]] | None = None,
        translator: Translator | None = None,
    ) -> None:
        self.translator: Translator = translator or NullTranslator()
        self._tables: dict[str, dict[str, Any]] = {}
        self._services: dict[tuple[str, str], Any] = {}
        for name, configuration in (tables or {}).items():
            self.register_table(name, configuration)

    # Initialization phase ---------------------------------------------
    def register_table(self, name: str, configuration: Mapping[str, Any]) -> None:
        self._tables[name] = copy.deepcopy(dict(configuration))
        self._invalidate(name)

    def register_override(self, name: str, override: Mapping[str, Any]) -> None:
        """Merge *override* into the configuration of *name* (override wins)."""
        self._tables[name] = merge_recursive_with_overrule(self.get_configuration(name), override)
        self._invalidate(name)
        _log.debug("tca_override_registered", data_type=name, keys=sorted(override))

    # Lookups -----------------------------------------------------------
    def has_table(self, name: str) -> bool:
        return name in self._tables

    def get_configuration(self, name: str) -> dict[str, Any]:
        try:
            return self._tables[name]
        except KeyError:
            raise InvalidKeyError(name, "the TCA registry") from None

    @property
    def table_names(self) -> list[str]:
        return list(self._tables)

    def table(self, name: str) -> TableService:
        return self._service("table", name, lambda: TableService(name, self))

    def grid(self, name: str) -> GridService:
        return self._service("grid", name, lambda: GridService(name, self))

    def frontend_grid(self, name: str) -> FrontendGridService:
        return self._service("frontend_grid", name, lambda: FrontendGridService(name, self))

    def _service(self, kind: str, name: str, build: Callable[[], S]) -> S:
        key = (kind, name)
        service = self._services.get(key)
        if service is None:
            self.get_configuration(name)
            # Two racing builders produce equal services; the first one stored wins.
            service = self._services.setdefault(key, build())
        return service

    def _invalidate(self, name: str) -> None:
        for key in [key for key in self._services if key[1] == name]:
            del self._services[key]


__all__ = ["TcaRegistry", "merge_recursive_with_overrule"]
