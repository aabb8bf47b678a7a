"""Change notifications for region catalog consumers."""

from regionmap.comms.event_bus import EventBus, RegionEvent

__all__ = ["EventBus", "RegionEvent"]
