"""Domain – records consumed by the front-end layer."""
from vidi_frontend.domain.selection import (
    InMemorySelectionRepository,
    Selection,
    SelectionRepository,
)

__all__ = ["InMemorySelectionRepository", "Selection", "SelectionRepository"]
