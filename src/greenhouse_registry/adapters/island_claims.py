"""In-memory island claims.

Stands in for the host platform's land-claim system when the registry runs
outside a game server (CLI, tests). It answers island lookups and publishes
deletion events the same way the host does.
"""

from __future__ import annotations

import logging

from greenhouse_registry.adapters.host_platform import EventPriority, IslandDeleteEvent, IslandDeleteHandler
from greenhouse_registry.models import Island, Position


class IslandClaims:
    """Island lookup and deletion event source backed by a plain list."""

    def __init__(self, islands: list[Island] | None = None, *, logger: logging.Logger | None = None) -> None:
        self._islands: list[Island] = []
        self._handlers: dict[EventPriority, list[IslandDeleteHandler]] = {priority: [] for priority in EventPriority}
        self._logger = logger or logging.getLogger("greenhouse_registry.island_claims")
        for island in islands or []:
            self.claim(island)

    @property
    def islands(self) -> list[Island]:
        return list(self._islands)

    def claim(self, island: Island) -> Island:
        overlapping = next((other for other in self._islands if _squares_overlap(island, other)), None)
        if overlapping is not None:
            raise ValueError(f"Island {island.unique_id} overlaps island {overlapping.unique_id}")
        self._islands.append(island)
        self._logger.debug("island_claimed", extra={"island": island.unique_id, "world": island.world})
        return island

    def get(self, unique_id: str) -> Island | None:
        return next((island for island in self._islands if island.unique_id == unique_id), None)

    def island_at(self, position: Position) -> Island | None:
        for island in self._islands:
            if island.claims(position):
                return island
        return None

    def subscribe(self, handler: IslandDeleteHandler, *, priority: EventPriority = EventPriority.NORMAL) -> None:
        self._handlers[priority].append(handler)

    def delete_island(self, island: Island, *, cancelled: bool = False) -> IslandDeleteEvent:
        """Publish a deletion event and drop the claim unless the event ends up cancelled.

        Normal handlers may cancel the event by setting ``event.cancelled``.
        Monitor handlers run afterwards, only for deletions that go ahead.
        """
        event = IslandDeleteEvent(island=island, cancelled=cancelled)
        for handler in self._handlers[EventPriority.NORMAL]:
            handler(event)

        if event.cancelled:
            self._logger.info("island_delete_cancelled", extra={"island": island.unique_id})
            return event

        self._islands = [other for other in self._islands if other is not island]
        for handler in self._handlers[EventPriority.MONITOR]:
            handler(event)
        self._logger.info("island_deleted", extra={"island": island.unique_id})
        return event


def _squares_overlap(a: Island, b: Island) -> bool:
    if a.world != b.world:
        return False
    return (
        a.center_x - a.protection_range < b.center_x + b.protection_range
        and b.center_x - b.protection_range < a.center_x + a.protection_range
        and a.center_z - a.protection_range < b.center_z + b.protection_range
        and b.center_z - b.protection_range < a.center_z + a.protection_range
    )
