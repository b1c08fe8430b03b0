"""Host platform adapters (island claims and lifecycle events)."""

from .host_platform import EventPriority, IslandDeleteEvent, IslandDeleteHandler, IslandEventSource, IslandLookup
from .island_claims import IslandClaims

__all__ = [
    "EventPriority",
    "IslandClaims",
    "IslandDeleteEvent",
    "IslandDeleteHandler",
    "IslandEventSource",
    "IslandLookup",
]
