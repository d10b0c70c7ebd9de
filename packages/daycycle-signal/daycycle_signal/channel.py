"""In-process broadcast channel for time event firings."""
from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

_Handler = Callable[[str], None]


class NotificationChannel:
    """Synchronous fan-out of event ids to subscribed handlers.

    Handlers for a specific event id run first, in registration order,
    followed by wildcard handlers. A handler that raises is logged and
    skipped; the rest still run.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._wildcard: list[_Handler] = []

    def subscribe(self, event_id: str, handler: _Handler) -> None:
        self._subscribers.setdefault(event_id, []).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        self._wildcard.append(handler)

    def unsubscribe(self, event_id: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_id)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def unsubscribe_all(self, handler: _Handler) -> None:
        try:
            self._wildcard.remove(handler)
        except ValueError:
            pass

    def listener_count(self, event_id: str) -> int:
        return len(self._subscribers.get(event_id, ())) + len(self._wildcard)

    def raise_event(self, event_id: str) -> int:
        """Notify every listener of event_id. Returns how many completed."""
        # Copy so handlers may (un)subscribe while being notified.
        handlers = list(self._subscribers.get(event_id, ())) + list(self._wildcard)
        completed = 0
        for handler in handlers:
            try:
                handler(event_id)
            except Exception:
                logger.exception("listener %r failed for event %s", handler, event_id)
                continue
            completed += 1
        return completed

    def clear(self) -> None:
        self._subscribers.clear()
        self._wildcard.clear()
