"""
Observable hunt state for presentation layers to subscribe to.
"""
from typing import Callable, List

from ..models.item import HuntState


StateListener = Callable[[HuntState], None]


class StateSubject:
    """Delivers hunt state snapshots to subscribed listeners."""

    def __init__(self):
        self._listeners: List[StateListener] = []

    def subscribe(self, listener: StateListener) -> StateListener:
        """Register a listener and return it (usable as a decorator)."""
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, snapshot: HuntState) -> None:
        """Send a snapshot to every listener.

        A failing listener is reported and skipped; it never affects the others.
        """
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                print(f"Error in state listener {listener!r}: {e}")
