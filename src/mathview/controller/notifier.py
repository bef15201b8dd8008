from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class ChangeNotifier:
    """
    Synchronous subscribe/notify fan-out.

    Listeners are called in registration order, once per notification.
    Listeners added or removed during a notification take effect from the
    next one.
    """
    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Remove the first registration of `listener`; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug(f"remove_listener: {listener!r} was not registered.")

    def notify_listeners(self) -> None:
        for listener in tuple(self._listeners):
            listener()

    def dispose(self) -> None:
        """Drop every listener."""
        self._listeners.clear()
