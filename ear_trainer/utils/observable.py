"""Minimal change notification for state holders."""

from __future__ import annotations

from typing import Callable, List

ChangeCallback = Callable[[str, object], None]
"""Signature: (field, new_value) -> None"""


class Observable:
    """Publish (field, value) pairs to subscribed callbacks, in subscription order."""

    def __init__(self) -> None:
        self._subscribers: List[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register *callback*; return a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, field: str, value: object) -> None:
        for callback in list(self._subscribers):
            callback(field, value)
