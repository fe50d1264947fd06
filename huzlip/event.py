"""A thread-safe signal with any number of listeners."""

from __future__ import annotations

import threading
from typing import Any, Callable


class Event:
    """Calls every connected listener, in connection order, on emit."""

    def __init__(self) -> None:
        self._listeners: list[Callable[..., Any]] = []
        self._lock = threading.RLock()

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register a listener."""
        with self._lock:
            self._listeners.append(slot)

    def emit(self, *args: Any) -> None:
        """Call every listener with the given arguments."""
        with self._lock:
            for listener in list(self._listeners):
                listener(*args)