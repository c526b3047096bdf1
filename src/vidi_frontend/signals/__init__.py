"""Signals – extension points for external code."""
from vidi_frontend.signals.dispatcher import SignalDispatcher, Slot

__all__ = ["SignalDispatcher", "Slot"]
