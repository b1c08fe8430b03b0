"""Boundary for the host platform's land-claim and event systems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Hashable, Protocol

from greenhouse_registry.models import Position


@dataclass(slots=True)
class IslandDeleteEvent:
    """Notification that an island is being permanently removed."""

    island: Hashable
    cancelled: bool = False


IslandDeleteHandler = Callable[[IslandDeleteEvent], None]


class EventPriority(str, Enum):
    """Dispatch phase of a deletion handler.

    ``NORMAL`` handlers may cancel the event. ``MONITOR`` handlers run after
    them and only see deletions that were not cancelled.
    """

    NORMAL = "normal"
    MONITOR = "monitor"


class IslandLookup(Protocol):
    """Resolves which island, if any, claims a world position."""

    def island_at(self, position: Position) -> Hashable | None:
        """Return the claiming island or None."""


class IslandEventSource(Protocol):
    """Delivers island lifecycle notifications to subscribers."""

    def subscribe(self, handler: IslandDeleteHandler, *, priority: EventPriority = EventPriority.NORMAL) -> None:
        """Register a handler for island deletion events."""
