"""Observable value holders for the query controller."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Signal(Generic[T]):
    """A value that observers can read at any time or subscribe to.

    Only the owning controller writes. Writing and notifying are separate
    steps so that several signals can be updated together before any
    observer runs.
    """

    def __init__(self, name: str, initial: T) -> None:
        self.name = name
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback invoked with the new value after each change.

        Args:
            callback: Called with the new value.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set(self, value: T) -> bool:
        """Store a value without notifying. Returns True if it changed."""
        changed = self._value != value
        self._value = value
        return changed

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self._value)
            except Exception:
                logger.exception(f"Subscriber of signal '{self.name}' failed")

    def __repr__(self) -> str:
        return f"Signal({self.name}={self._value!r})"
