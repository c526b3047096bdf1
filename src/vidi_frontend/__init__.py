"""
vidi_frontend – front-end layer of the Vidi data grid.

Import path convention::

    from vidi_frontend.persistence import MatcherFactory, OrderFactory
    from vidi_frontend.tca import TcaRegistry, FrontendGridService
    from vidi_frontend.facet import Facet, StandardFacet
    from vidi_frontend.signals import SignalDispatcher
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
