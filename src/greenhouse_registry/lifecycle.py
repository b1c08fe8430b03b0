"""Keeps the registry consistent with island lifecycle events."""

from __future__ import annotations

import logging

from greenhouse_registry.adapters.host_platform import EventPriority, IslandDeleteEvent, IslandEventSource
from greenhouse_registry.registry import GreenhouseRegistry


class IslandLifecycleBridge:
    """Drops every greenhouse of an island once the island is deleted."""

    def __init__(self, registry: GreenhouseRegistry, *, logger: logging.Logger | None = None) -> None:
        self._registry = registry
        self._logger = logger or logging.getLogger("greenhouse_registry.lifecycle")

    def attach(self, source: IslandEventSource) -> None:
        source.subscribe(self.on_island_delete, priority=EventPriority.MONITOR)

    def on_island_delete(self, event: IslandDeleteEvent) -> None:
        if event.cancelled:
            self._logger.debug("island_delete_ignored", extra={"reason": "cancelled"})
            return
        self._registry.remove_all_for_island(event.island)
