"""Listener registry for key events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from termkeys.events import KEY_EVENT, KeyEvent

logger = logging.getLogger(__name__)

KeyListener = Callable[[KeyEvent], None]


@dataclass(eq=False)
class _Registration:
    callback: KeyListener
    once: bool = False


class ListenerRegistry:
    """
    Ordered key listeners with ``on`` / ``once`` / ``off`` semantics.

    Only the ``"key"`` category exists. Any other name is reported on the
    logger and otherwise ignored, so a typo never takes the input loop down.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[_Registration]] = {KEY_EVENT: []}

    def _registrations(self, event: str) -> list[_Registration] | None:
        registrations = self._listeners.get(event)
        if registrations is None:
            logger.error("Unknown event name: %r", event)
        return registrations

    def on(self, event: str, callback: KeyListener) -> None:
        """Call ``callback`` for every key event."""
        registrations = self._registrations(event)
        if registrations is not None:
            registrations.append(_Registration(callback))

    def once(self, event: str, callback: KeyListener) -> None:
        """Call ``callback`` for the next key event only."""
        registrations = self._registrations(event)
        if registrations is not None:
            registrations.append(_Registration(callback, once=True))

    def off(self, event: str, callback: KeyListener) -> None:
        """
        Remove the most recent registration of ``callback``.

        During an ``emit`` a removed persistent listener is still called for
        the event in flight, while a removed one-shot listener is skipped.
        """
        registrations = self._registrations(event)
        if registrations is None:
            return
        for index in range(len(registrations) - 1, -1, -1):
            if registrations[index].callback == callback:
                del registrations[index]
                return

    def emit(self, key_event: KeyEvent) -> None:
        registrations = self._listeners[KEY_EVENT]
        for registration in list(registrations):
            if registration.once:
                if registration not in registrations:
                    continue
                registrations.remove(registration)
            registration.callback(key_event)

    def listener_count(self, event: str = KEY_EVENT) -> int:
        return len(self._listeners.get(event, ()))

    def clear(self) -> None:
        for registrations in self._listeners.values():
            registrations.clear()
