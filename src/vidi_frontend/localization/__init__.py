"""Localization – label translation port."""
from vidi_frontend.localization.translator import (
    CatalogTranslator,
    NullTranslator,
    Translator,
    translate_label,
)

__all__ = ["CatalogTranslator", "NullTranslator", "Translator", "translate_label"]
