"""TCA – base grid configuration of a data type."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vidi_frontend.facet import Facet, StandardFacet
from vidi_frontend.kernel.errors import InvalidKeyError
from vidi_frontend.localization import translate_label

if TYPE_CHECKING:
    from vidi_frontend.tca.registry import TcaRegistry


class GridService:
    """Columns and facets listed under the ``grid`` key of a table."""

    config_key = "grid"

    def __init__(self, table_name: str, registry: TcaRegistry) -> None:
        self.table_name = table_name
        self._registry = registry
        self.tca: dict[str, Any] = registry.get_configuration(table_name).get(self.config_key) or {}
        self._facets: dict[str, Facet] | None = None

    @property
    def columns(self) -> dict[str, Any]:
        return self.tca.get("columns") or {}

    def get_all_fields(self) -> dict[str, Any]:
        return dict(self.columns)

    def get_fields(self) -> dict[str, Any]:
        return self.get_all_fields()

    def has_field(self, field_name: str) -> bool:
        return field_name in self.columns

    def get_field(self, field_name: str) -> dict[str, Any]:
        if field_name not in self.columns:
            raise InvalidKeyError(field_name, f"the grid of table '{self.table_name}'")
        return self.columns[field_name] or {}

    def has_label(self, field_name: str) -> bool:
        return self.has_field(field_name) and bool(self.get_field(field_name).get("label"))

    def get_label(self, field_name: str) -> str:
        """Column label, then the table field label, then the field name."""
        if self.has_label(field_name):
            return translate_label(self._registry.translator, str(self.get_field(field_name)["label"]))
        table = self._registry.table(self.table_name)
        if table.has_field(field_name):
            return table.field(field_name).get_label()
        return field_name

    def get_facets(self) -> dict[str, Facet]:
        if self._facets is None:
            facets: dict[str, Facet] = {}
            for facet_name_or_object in self.tca.get("facets") or []:
                facet = self._to_facet(facet_name_or_object)
                facets[facet.name] = facet
            self._facets = facets
        return self._facets

    def get_facet_names(self) -> list[str]:
        return list(self.get_facets())

    def has_facet(self, facet_name: str) -> bool:
        return facet_name in self.get_facets()

    def facet(self, facet_name: str) -> Facet:
        facets = self.get_facets()
        if facet_name not in facets:
            raise InvalidKeyError(facet_name, f"the facets of table '{self.table_name}'")
        return facets[facet_name]

    def instantiate_standard_facet(self, facet_name: str) -> StandardFacet:
        return StandardFacet(facet_name, label=self.get_label(facet_name))

    def _to_facet(self, facet_name_or_object: Facet | str) -> Facet:
        if isinstance(facet_name_or_object, Facet):
            return facet_name_or_object
        return self.instantiate_standard_facet(str(facet_name_or_object))


__all__ = ["GridService"]
