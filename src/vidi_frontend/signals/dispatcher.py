"""Signal – synchronous in-process signal/slot dispatcher."""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

#: A slot receives the signal arguments and may return a replacement for
#: the first one.
Slot = Callable[..., Any]


def signal_key(signal_class: type | str, signal_name: str) -> tuple[str, str]:
    if isinstance(signal_class, type):
        return f"{signal_class.__module__}.{signal_class.__qualname__}", signal_name
    return str(signal_class), signal_name


class SignalDispatcher:
    """Registry of slots connected to named signals.

    Slots run synchronously in registration order. Each slot receives the
    current arguments; when it returns something other than ``None`` that
    value replaces the first argument for the following slots and in the
    returned argument list.

    Example::

        dispatcher = SignalDispatcher()
        dispatcher.connect(MatcherFactory, "postProcessMatcherObject", restrict_to_pid)
        matcher, data_type = dispatcher.dispatch(
            MatcherFactory, "postProcessMatcherObject", matcher, "fe_users"
        )
    """

    def __init__(self) -> None:
        self._slots: dict[tuple[str, str], list[Slot]] = defaultdict(list)

    def connect(self, signal_class: type | str, signal_name: str, slot: Slot) -> None:
        slots = self._slots[signal_key(signal_class, signal_name)]
        if slot not in slots:
            slots.append(slot)

    def disconnect(self, signal_class: type | str, signal_name: str, slot: Slot) -> None:
        slots = self._slots.get(signal_key(signal_class, signal_name), [])
        if slot in slots:
            slots.remove(slot)

    def get_slots(self, signal_class: type | str, signal_name: str) -> list[Slot]:
        return list(self._slots.get(signal_key(signal_class, signal_name), []))

    def dispatch(self, signal_class: type | str, signal_name: str, *arguments: Any) -> list[Any]:
        current = list(arguments)
        for slot in self.get_slots(signal_class, signal_name):
            result = slot(*current)
            if result is not None and current:
                current[0] = result
        return current


__all__ = ["SignalDispatcher", "Slot", "signal_key"]
