"""Persistence – parser for static ``field=value`` / ``field like value`` constraints.

Entries are comma-separated. An entry holding ``=`` is always read as an
equality, so ``title like a=b`` is an equality on ``title like a``. Values
that themselves contain ``=``, ``,`` or a whitespace-delimited ``like`` cannot
be expressed and the entry is skipped.
"""
from __future__ import annotations

import re
from typing import Iterator

from vidi_frontend.persistence.matcher import Constraint, Operator

_LIKE_SEPARATOR = re.compile(r"\s+like\s+", re.IGNORECASE)


def trim_explode(delimiter: str | re.Pattern[str], value: str) -> list[str]:
    """Split *value*, strip every part and drop the empty ones."""
    if isinstance(delimiter, re.Pattern):
        parts = delimiter.split(value)
    else:
        parts = value.split(delimiter)
    return [part.strip() for part in parts if part.strip()]


def parse_constraint(entry: str) -> Constraint | None:
    """Parse one entry, returning ``None`` when it matches neither grammar."""
    if "=" in entry:
        parts = trim_explode("=", entry)
        if len(parts) == 2:
            return Constraint(parts[0], Operator.EQUALS, parts[1])
        return None

    if _LIKE_SEPARATOR.search(entry) is None:
        return None
    parts = trim_explode(_LIKE_SEPARATOR, entry)
    if len(parts) == 2:
        return Constraint(parts[0], Operator.LIKE, parts[1])
    return None


def iter_constraints(config: str) -> Iterator[tuple[str, Constraint | None]]:
    """Yield every non-empty entry of *config* with its parsed constraint."""
    for entry in trim_explode(",", config or ""):
        yield entry, parse_constraint(entry)


__all__ = ["iter_constraints", "parse_constraint", "trim_explode"]
