"""TCA – table and field metadata services."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from vidi_frontend.kernel.errors import InvalidKeyError
from vidi_frontend.localization import Translator, translate_label

if TYPE_CHECKING:
    from vidi_frontend.tca.registry import TcaRegistry

#: Columns every table carries without declaring them.
SYSTEM_FIELDS = frozenset({"uid", "pid", "tstamp", "crdate", "deleted", "hidden", "sorting"})

_NUMERIC_EVALS = frozenset({"int", "double2", "num"})
_ORDER_BY_PREFIX = re.compile(r"^\s*order\s+by\s+", re.IGNORECASE)


class FieldService:
    """Answers questions about one column of a table."""

    def __init__(
        self,
        field_name: str,
        configuration: dict[str, Any],
        table_name: str,
        translator: Translator,
    ) -> None:
        self.field_name = field_name
        self.table_name = table_name
        self._tca = configuration
        self._translator = translator

    @property
    def config(self) -> dict[str, Any]:
        return self._tca.get("config") or {}

    def get_type(self) -> str:
        return str(self.config.get("type", ""))

    def is_system(self) -> bool:
        return self.field_name in SYSTEM_FIELDS

    def is_numerical(self) -> bool:
        if self.is_system() or self.get_type() == "number":
            return True
        evals = {part.strip() for part in str(self.config.get("eval", "")).split(",")}
        return bool(evals & _NUMERIC_EVALS)

    def has_relation(self) -> bool:
        if self.config.get("foreign_table"):
            return True
        return self.get_type() == "group" and bool(self.config.get("allowed"))

    def relation_data_type(self) -> str | None:
        """Return the table a relational column points to."""
        if self.config.get("foreign_table"):
            return str(self.config["foreign_table"])
        if self.get_type() == "group" and self.config.get("allowed"):
            return str(self.config["allowed"]).split(",")[0].strip()
        return None

    def get_label(self) -> str:
        label = self._tca.get("label")
        if not label:
            return self.field_name
        return translate_label(self._translator, str(label))


class TableService:
    """Schema lookups for one data type."""

    def __init__(self, table_name: str, registry: TcaRegistry) -> None:
        self.table_name = table_name
        self._registry = registry
        self.tca = registry.get_configuration(table_name)
        self._fields: dict[str, FieldService] = {}

    @property
    def columns(self) -> dict[str, Any]:
        return self.tca.get("columns") or {}

    @property
    def ctrl(self) -> dict[str, Any]:
        return self.tca.get("ctrl") or {}

    def has_field(self, field_name: str) -> bool:
        return field_name in self.columns or field_name in SYSTEM_FIELDS

    def get_fields(self) -> list[str]:
        return list(self.columns)

    def field(self, field_name: str) -> FieldService:
        if not self.has_field(field_name):
            raise InvalidKeyError(field_name, f"the columns of table '{self.table_name}'")
        if field_name not in self._fields:
            self._fields[field_name] = FieldService(
                field_name,
                self.columns.get(field_name) or {},
                self.table_name,
                self._registry.translator,
            )
        return self._fields[field_name]

    def get_label(self) -> str:
        title = self.ctrl.get("title")
        if not title:
            return self.table_name
        return translate_label(self._registry.translator, str(title))

    def get_label_field(self) -> str:
        return str(self.ctrl.get("label", "uid"))

    def get_default_orderings(self) -> dict[str, str]:
        """Return the default orderings as ``field -> "ASC" | "DESC"``.

        Read from ``ctrl.default_sortby`` (``"ORDER BY title ASC, uid DESC"``)
        or, failing that, from the manual sorting column ``ctrl.sortby``.
        """
        orderings: dict[str, str] = {}
        default_sortby = str(self.ctrl.get("default_sortby") or "").strip()
        if default_sortby:
            for ordering in _ORDER_BY_PREFIX.sub("", default_sortby).split(","):
                parts = ordering.split()
                if not parts:
                    continue
                direction = parts[1].upper() if len(parts) > 1 else "ASC"
                orderings[parts[0]] = direction if direction in ("ASC", "DESC") else "ASC"
        elif self.ctrl.get("sortby"):
            orderings[str(self.ctrl["sortby"])] = "ASC"
        return orderings


__all__ = ["SYSTEM_FIELDS", "FieldService", "TableService"]
