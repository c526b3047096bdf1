"""Facets – named filter units of a grid."""
from vidi_frontend.facet.base import Facet, StandardFacet

__all__ = ["Facet", "StandardFacet"]
