"""TCA – table configuration registry, schema lookups and grids."""
from vidi_frontend.tca.field_path import FieldPathResolver
from vidi_frontend.tca.frontend_grid import BUTTONS_COLUMN, SHOW_BUTTON_RENDERER, FrontendGridService
from vidi_frontend.tca.grid import GridService
from vidi_frontend.tca.registry import TcaRegistry, merge_recursive_with_overrule
from vidi_frontend.tca.table import SYSTEM_FIELDS, FieldService, TableService

__all__ = [
    "BUTTONS_COLUMN",
    "SHOW_BUTTON_RENDERER",
    "SYSTEM_FIELDS",
    "FieldPathResolver",
    "FieldService",
    "FrontendGridService",
    "GridService",
    "TableService",
    "TcaRegistry",
    "merge_recursive_with_overrule",
]
