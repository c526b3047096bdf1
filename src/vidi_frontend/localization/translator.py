"""Localization – Translator port and a catalog-backed adapter."""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

#: Prefix of labels that reference a translation catalog entry.
LABEL_REFERENCE_PREFIX = "LLL:"


@runtime_checkable
class Translator(Protocol):
    def translate(self, key: str) -> str | None: ...


class NullTranslator:
    """Translator that knows no keys."""

    def translate(self, key: str) -> str | None:
        return None


class CatalogTranslator:
    """Look labels up in an in-memory ``key -> text`` catalog."""

    def __init__(self, catalog: Mapping[str, str] | None = None) -> None:
        self._catalog = dict(catalog or {})

    def translate(self, key: str) -> str | None:
        return self._catalog.get(key)

    def add(self, key: str, text: str) -> None:
        self._catalog[key] = text


def translate_label(translator: Translator, label: str) -> str:
    """Translate *label* when it is a catalog reference.

    Falls back to the raw label when the translator has no entry.
    """
    if not label.startswith(LABEL_REFERENCE_PREFIX):
        return label
    translated = translator.translate(label)
    return label if translated is None else translated


__all__ = [
    "LABEL_REFERENCE_PREFIX",
    "CatalogTranslator",
    "NullTranslator",
    "Translator",
    "translate_label",
]
