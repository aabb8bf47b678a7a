"""EventBus — synchronous pub/sub for catalog change notifications.

Listeners are plain callables invoked on the publisher's thread, in
subscription order, before publish() returns. There is no queueing or
batching: a listener sees the catalog exactly as the mutating call left it.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable

from loguru import logger


class RegionEvent(str, Enum):
    """Notification types published by RegionCatalog."""
    REGIONS_CHANGED = "regions_changed"
    SELECTED_REGION_CHANGED = "selected_region_changed"
    REGION_STATUS_CHANGED = "region_status_changed"
    REGION_CLICKED = "region_clicked"
    REGION_COLORS_CHANGED = "region_colors_changed"


Listener = Callable[[dict], None]


class EventBus:
    """Simple synchronous pub/sub for pushing events to listeners."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[tuple[Listener, str | None]] = []

    def subscribe(self, callback: Listener, event_type: str | None = None) -> Listener:
        """Register ``callback`` for one event type, or all events if None.

        Returns the callback so it can be used as a decorator.
        """
        if isinstance(event_type, RegionEvent):
            event_type = event_type.value
        with self._lock:
            self._subscribers.append((callback, event_type))
        return callback

    def unsubscribe(self, callback: Listener) -> None:
        """Remove every registration of ``callback``. Unknown callbacks are ignored."""
        with self._lock:
            self._subscribers = [(cb, et) for cb, et in self._subscribers if cb != callback]

    def publish(self, event_type: str, data: dict | None = None) -> None:
        if isinstance(event_type, RegionEvent):
            event_type = event_type.value
        msg = {"type": event_type}
        if data is not None:
            msg["data"] = data
        with self._lock:
            subscribers = list(self._subscribers)
        for callback, wanted in subscribers:
            if wanted is not None and wanted != event_type:
                continue
            try:
                callback(msg)
            except Exception:
                # Delivery continues past a failing listener
                logger.exception(f"Listener {callback!r} failed on '{event_type}'")
