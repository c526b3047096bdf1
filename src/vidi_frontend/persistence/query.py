"""Persistence – decoding of the structured query sent by the visual search."""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Iterator, Mapping
from urllib.parse import unquote


@dataclasses.dataclass(frozen=True)
class QueryFragment:
    """One ``field path -> value`` pair of a structured query."""
    field_path: str
    value: Any


def extract_search_value(search: str | Mapping[str, Any] | None) -> str:
    """Return the raw search string.

    The DataTables plugin posts ``search`` as ``{"value": ..., "regex": ...}``;
    other callers send the plain string.
    """
    if search is None:
        return ""
    if isinstance(search, Mapping):
        value = search.get("value")
        return str(value) if value else ""
    return str(search)


def decode_query(raw: str) -> list[Any] | None:
    """Decode a JSON query, returning ``None`` when it is not structured.

    A list is returned as-is; an object is read as one fragment per key.
    Scalars, malformed JSON and nesting too deep to decode are not structured.
    """
    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    if isinstance(decoded, list):
        return decoded
    if isinstance(decoded, dict):
        return [{key: value} for key, value in decoded.items()]
    return None


def url_decode(raw: str) -> str:
    """Decode ``%XX`` escapes, leaving ``+`` untouched."""
    return unquote(raw)


def iter_fragments(query_parts: list[Any]) -> Iterator[QueryFragment]:
    """Yield a fragment for every single-key object in *query_parts*."""
    for part in query_parts:
        if isinstance(part, dict) and len(part) == 1:
            field_path, value = next(iter(part.items()))
            yield QueryFragment(str(field_path), value)


__all__ = [
    "QueryFragment",
    "decode_query",
    "extract_search_value",
    "iter_fragments",
    "url_decode",
]
