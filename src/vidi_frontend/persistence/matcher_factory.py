"""Persistence – MatcherFactory: request inputs to one Matcher."""
from __future__ import annotations

from typing import Any, Mapping

from vidi_frontend.config.settings import FrontendSettings
from vidi_frontend.domain import InMemorySelectionRepository, SelectionRepository
from vidi_frontend.observability.logging import get_logger
from vidi_frontend.persistence.constraints import iter_constraints
from vidi_frontend.persistence.matcher import Matcher, Operator
from vidi_frontend.persistence.query import (
    decode_query,
    extract_search_value,
    iter_fragments,
    url_decode,
)
from vidi_frontend.signals import SignalDispatcher
from vidi_frontend.tca import FieldPathResolver, FieldService, TcaRegistry

_log = get_logger(__name__)

#: Pseudo field of the visual search carrying a free-text term.
TEXT_FIELD = "text"

POST_PROCESS_MATCHER_SIGNAL = "postProcessMatcherObject"


def can_be_interpreted_as_integer(value: Any) -> bool:
    """``True`` for ints and for strings in canonical integer form."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if not isinstance(value, str):
        return False
    try:
        return str(int(value)) == value
    except ValueError:
        return False


def is_operator_equals(field: FieldService, value: Any) -> bool:
    """Tell whether a search on *field* compares with equals rather than like."""
    return (field.has_relation() and can_be_interpreted_as_integer(value)) or field.is_numerical()


def _selection_identifier(value: int | str | None) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    text = str(value).strip()
    return int(text) if text.isascii() and text.isdigit() else 0


class MatcherFactory:
    """Build the Matcher of one front-end grid request.

    Inputs are applied in a fixed order so that later sources refine the
    earlier ones:

    1. static constraints of the content element (``additional_equals``),
    2. the search sent by the client, structured JSON or free text,
    3. the saved selection configured on the content element.

    Slots connected to ``postProcessMatcherObject`` then get the last word.
    """

    def __init__(
        self,
        settings: FrontendSettings,
        registry: TcaRegistry,
        *,
        selection_repository: SelectionRepository | None = None,
        dispatcher: SignalDispatcher | None = None,
        field_path_resolver: FieldPathResolver | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._selection_repository = selection_repository or InMemorySelectionRepository()
        self._dispatcher = dispatcher or SignalDispatcher()
        self._field_path_resolver = field_path_resolver or FieldPathResolver(registry)

    @property
    def dispatcher(self) -> SignalDispatcher:
        return self._dispatcher

    def get_matcher(
        self,
        data_type: str,
        search: str | Mapping[str, Any] | None = None,
        matches: Mapping[str, Any] | None = None,
    ) -> Matcher:
        """Build the matcher of a request using the configured settings."""
        return self.build(
            search,
            self._settings.selection,
            self._settings.additional_equals,
            data_type,
            matches=matches,
        )

    def build(
        self,
        raw_search_input: str | Mapping[str, Any] | None,
        saved_selection_id: int | str | None,
        static_constraints: str,
        data_type: str,
        *,
        matches: Mapping[str, Any] | None = None,
    ) -> Matcher:
        matcher = Matcher(matches, data_type)
        matcher = self.apply_criteria_from_additional_constraints(matcher, static_constraints)
        matcher = self.apply_criteria_from_search(matcher, raw_search_input, data_type)
        matcher = self.apply_criteria_from_selection(matcher, saved_selection_id, data_type)
        matcher = self.emit_post_process_matcher_signal(matcher)

        _log.debug(
            "matcher_built",
            data_type=data_type,
            constraints=len(matcher.constraints),
            search_term=matcher.search_term,
        )
        return matcher

    def apply_criteria_from_additional_constraints(self, matcher: Matcher, config: str) -> Matcher:
        for entry, constraint in iter_constraints(config):
            if constraint is None:
                _log.debug("static_constraint_skipped", entry=entry)
            elif constraint.operator is Operator.EQUALS:
                matcher.equals(constraint.field, constraint.value)
            else:
                matcher.like(constraint.field, constraint.value)
        return matcher

    def apply_criteria_from_search(
        self,
        matcher: Matcher,
        search: str | Mapping[str, Any] | None,
        data_type: str,
    ) -> Matcher:
        query = extract_search_value(search)
        if not query:
            return matcher

        query = url_decode(query)
        query_parts = decode_query(query)
        if query_parts is None:
            matcher.set_search_term(query)
            return matcher
        return self.parse_query(query_parts, matcher, data_type)

    def apply_criteria_from_selection(
        self,
        matcher: Matcher,
        selection_id: int | str | None,
        data_type: str,
    ) -> Matcher:
        identifier = _selection_identifier(selection_id)
        if identifier <= 0:
            return matcher

        selection = self._selection_repository.get_or_raise(identifier)
        _log.debug("selection_loaded", selection=identifier, data_type=data_type)
        query_parts = decode_query(selection.query)
        if query_parts is None:
            _log.debug("selection_query_unstructured", selection=identifier)
            return matcher
        return self.parse_query(query_parts, matcher, data_type)

    def parse_query(self, query_parts: list[Any], matcher: Matcher, data_type: str) -> Matcher:
        for fragment in iter_fragments(query_parts):
            field_path, value = fragment.field_path, fragment.value
            resolved_data_type, field_name = self._field_path_resolver.resolve(field_path, data_type)

            grid = self._registry.frontend_grid(resolved_data_type)
            table = self._registry.table(resolved_data_type)
            if grid.has_facet(field_name) and grid.facet(field_name).can_modify_matcher():
                result = grid.facet(field_name).modify_matcher(matcher, value)
                if isinstance(result, Matcher):
                    matcher = result
            elif table.has_field(field_name):
                if is_operator_equals(table.field(field_name), value):
                    matcher.equals(field_path, value)
                else:
                    matcher.like(field_path, value)
            elif field_path == TEXT_FIELD and value is not None:
                # Searched with "like" across the search fields of the table.
                matcher.set_search_term(str(value))
            else:
                _log.debug("query_fragment_dropped", field=field_path, data_type=data_type)
        return matcher

    def emit_post_process_matcher_signal(self, matcher: Matcher) -> Matcher:
        result, _ = self._dispatcher.dispatch(
            MatcherFactory, POST_PROCESS_MATCHER_SIGNAL, matcher, matcher.data_type
        )
        return result if isinstance(result, Matcher) else matcher


__all__ = [
    "POST_PROCESS_MATCHER_SIGNAL",
    "TEXT_FIELD",
    "MatcherFactory",
    "can_be_interpreted_as_integer",
    "is_operator_equals",
]
