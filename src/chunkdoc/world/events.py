"""Synchronous event signals.

The world announces lifecycle changes (currently entity removal) through
signals. Subscribers run synchronously, in subscription order, before the
emitting call returns.

Usage:
    signal: EventSignal[EntityRemovedEvent] = EventSignal("entity_removed")

    @signal.subscribe
    def on_removed(event: EntityRemovedEvent) -> None:
        ...

    signal.emit(EntityRemovedEvent(removed_entity_id="0:1000:0"))
    signal.unsubscribe(on_removed)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")

Callback = Callable[[E], object]


@dataclass(frozen=True, slots=True)
class EntityRemovedEvent:
    """Emitted after an entity has been removed from the world.

    Attributes:
        removed_entity_id: Stable string id of the removed entity.
    """

    removed_entity_id: str


class EventSignal(Generic[E]):
    """Ordered list of callbacks invoked for each emitted event."""

    def __init__(self, name: str):
        self.name = name
        self._callbacks: list[Callback[E]] = []

    def subscribe(self, callback: Callback[E]) -> Callback[E]:
        """Register a callback. Returns it so this can be used as a decorator."""
        self._callbacks.append(callback)
        logger.debug("Subscribed %r to %s", callback, self.name)
        return callback

    def unsubscribe(self, callback: Callback[E]) -> bool:
        """Remove a callback. Returns True if it was subscribed."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def emit(self, event: E) -> int:
        """Deliver an event to every subscriber.

        A failing callback is logged and does not prevent later callbacks
        from running; the emitter is the host, not the subscriber's caller.

        Returns:
            Number of callbacks that completed without raising.
        """
        delivered = 0
        for callback in list(self._callbacks):
            try:
                callback(event)
            except Exception:
                logger.warning("Callback %r failed for %s", callback, self.name, exc_info=True)
                continue
            delivered += 1
        return delivered

    def __len__(self) -> int:
        return len(self._callbacks)
