"""TCA – grid configuration merged for front-end rendering."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vidi_frontend.facet import Facet
from vidi_frontend.localization import translate_label
from vidi_frontend.tca.grid import GridService

if TYPE_CHECKING:
    from vidi_frontend.tca.registry import TcaRegistry

#: Renderer of the column holding the "show detail" button.
SHOW_BUTTON_RENDERER = "ShowButtonRenderer"
BUTTONS_COLUMN = "__buttons"


class FrontendGridService(GridService):
    """Grid read from ``grid_frontend`` and layered over the base ``grid``.

    Front-end columns and facets win over the base ones; anything the
    front-end configuration is silent on comes from the base grid.
    """

    config_key = "grid_frontend"

    def __init__(self, table_name: str, registry: TcaRegistry) -> None:
        frontend = registry.get_configuration(table_name).setdefault(self.config_key, {})
        columns = frontend.setdefault("columns", {})
        columns.setdefault(BUTTONS_COLUMN, {"renderer": SHOW_BUTTON_RENDERER})
        super().__init__(table_name, registry)
        self._base = registry.grid(table_name)

    def get_fields(self) -> dict[str, Any]:
        """Base columns followed by the front-end ones.

        A column present in both keeps its base position and takes the
        front-end configuration.
        """
        fields = self._base.get_all_fields()
        fields.update(self.columns)
        return fields

    def has_field(self, field_name: str) -> bool:
        return field_name in self.columns or self._base.has_field(field_name)

    def has_label(self, field_name: str) -> bool:
        return bool((self.columns.get(field_name) or {}).get("label"))

    def get_label(self, field_name: str) -> str:
        if self.has_label(field_name):
            label = str(self.columns[field_name]["label"])
            return translate_label(self._registry.translator, label)
        return self._base.get_label(field_name)

    def get_facets(self) -> dict[str, Facet]:
        if self._facets is None:
            facets = dict(self._base.get_facets())
            for facet_name_or_object in self.tca.get("facets") or []:
                facet = self._to_facet(facet_name_or_object)
                facets[facet.name] = facet
            self._facets = facets
        return self._facets

    def get_facet_names(self) -> list[str]:
        """Front-end facet names first, then base names not listed yet."""
        names = [self._to_name(facet) for facet in self.tca.get("facets") or []]
        for name in self._base.get_facet_names():
            if name not in names:
                names.append(name)
        return list(dict.fromkeys(names))

    @staticmethod
    def _to_name(facet_name_or_object: Facet | str) -> str:
        if isinstance(facet_name_or_object, Facet):
            return facet_name_or_object.name
        return str(facet_name_or_object)


__all__ = ["BUTTONS_COLUMN", "SHOW_BUTTON_RENDERER", "FrontendGridService"]
