"""TCA – resolution of dotted field paths such as ``usergroup.title``."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vidi_frontend.tca.registry import TcaRegistry


class FieldPathResolver:
    """Follow relational segments of a field path to the owning data type.

    ``usergroup.title`` on ``fe_users`` resolves to ``("fe_groups", "title")``
    when ``usergroup`` is a relation to ``fe_groups``. Traversal stops at the
    first segment that is not a relation to a registered table; the remaining
    segments are then kept together as the field name.
    """

    def __init__(self, registry: TcaRegistry) -> None:
        self._registry = registry

    def resolve(self, field_path: str, data_type: str) -> tuple[str, str]:
        segments = field_path.split(".")
        while len(segments) > 1:
            table = self._registry.table(data_type)
            if not table.has_field(segments[0]):
                break
            foreign_data_type = table.field(segments[0]).relation_data_type()
            if foreign_data_type is None or not self._registry.has_table(foreign_data_type):
                break
            data_type = foreign_data_type
            segments = segments[1:]
        return data_type, ".".join(segments)

    def get_data_type(self, field_path: str, data_type: str) -> str:
        return self.resolve(field_path, data_type)[0]

    def strip_field_path(self, field_path: str, data_type: str) -> str:
        return self.resolve(field_path, data_type)[1]

    def contains_path(self, field_path: str, data_type: str) -> bool:
        return self.strip_field_path(field_path, data_type) != field_path


__all__ = ["FieldPathResolver"]
