"""Per-island registry of greenhouse volumes."""

from __future__ import annotations

import logging
import threading
from typing import Hashable

from greenhouse_registry.adapters.host_platform import IslandLookup
from greenhouse_registry.models import AddResult, Greenhouse, Position


class GreenhouseRegistry:
    """Tracks which greenhouses sit on which island.

    Ownership is never stored on a greenhouse; every call re-resolves the
    island through ``island_lookup``. Greenhouses on the same island never
    have intersecting footprints. All operations are serialized by one lock
    over the whole mapping.
    """

    def __init__(self, island_lookup: IslandLookup, *, logger: logging.Logger | None = None) -> None:
        self._island_lookup = island_lookup
        self._logger = logger or logging.getLogger("greenhouse_registry.registry")
        self._greenhouses: dict[Hashable, list[Greenhouse]] = {}
        self._lock = threading.RLock()

    def add_greenhouse(self, greenhouse: Greenhouse) -> AddResult:
        """Register ``greenhouse`` on the island under its anchor."""
        if greenhouse.anchor is None:
            self._logger.info(
                "greenhouse_rejected",
                extra={"result": AddResult.NULL.value, "greenhouse": greenhouse.name},
            )
            return AddResult.NULL

        with self._lock:
            island = self._island_lookup.island_at(greenhouse.anchor)
            if island is None:
                self._logger.info(
                    "greenhouse_rejected",
                    extra={"result": AddResult.FAIL_NO_ISLAND.value, "greenhouse": greenhouse.name},
                )
                return AddResult.FAIL_NO_ISLAND

            existing = self._greenhouses.setdefault(island, [])
            if any(other.footprint.intersects(greenhouse.footprint) for other in existing):
                self._logger.info(
                    "greenhouse_rejected",
                    extra={"result": AddResult.FAIL_OVERLAPPING.value, "greenhouse": greenhouse.name},
                )
                return AddResult.FAIL_OVERLAPPING

            existing.append(greenhouse)
            self._logger.info(
                "greenhouse_added",
                extra={"greenhouse": greenhouse.name, "island_greenhouses": len(existing)},
            )
            return AddResult.SUCCESS

    def get_greenhouse(self, position: Position) -> Greenhouse | None:
        """Return the greenhouse whose volume contains ``position``, if any."""
        with self._lock:
            for greenhouse in self._island_greenhouses(position):
                if greenhouse.contains(position):
                    return greenhouse
        return None

    def in_greenhouse(self, position: Position) -> bool:
        return self.get_greenhouse(position) is not None

    def is_above_greenhouse(self, position: Position) -> bool:
        """True when ``position`` is over the roof of the greenhouse covering its column."""
        with self._lock:
            greenhouse = self._column_greenhouse(position)
        if greenhouse is None:
            return False
        return position.block_y > greenhouse.ceiling_height

    def remove_greenhouse(self, greenhouse: Greenhouse) -> None:
        if greenhouse.anchor is None:
            return

        with self._lock:
            island = self._island_lookup.island_at(greenhouse.anchor)
            if island is None:
                return
            entries = self._greenhouses.get(island, [])
            for index, registered in enumerate(entries):
                if registered is greenhouse:
                    del entries[index]
                    self._logger.info(
                        "greenhouse_removed",
                        extra={"greenhouse": greenhouse.name, "island_greenhouses": len(entries)},
                    )
                    return

    def remove_all_for_island(self, island: Hashable) -> None:
        with self._lock:
            removed = self._greenhouses.pop(island, None)
        if removed:
            self._logger.info(
                "island_greenhouses_removed",
                extra={"island": getattr(island, "unique_id", repr(island)), "count": len(removed)},
            )

    def list_all(self) -> list[Greenhouse]:
        """Snapshot of every registered greenhouse, grouped by island in insertion order."""
        with self._lock:
            return [greenhouse for entries in self._greenhouses.values() for greenhouse in entries]

    def greenhouses_on(self, island: Hashable) -> list[Greenhouse]:
        with self._lock:
            return list(self._greenhouses.get(island, []))

    def __len__(self) -> int:
        with self._lock:
            return sum(len(entries) for entries in self._greenhouses.values())

    def __contains__(self, greenhouse: object) -> bool:
        with self._lock:
            return any(
                registered is greenhouse for entries in self._greenhouses.values() for registered in entries
            )

    def _island_greenhouses(self, position: Position) -> list[Greenhouse]:
        island = self._island_lookup.island_at(position)
        if island is None:
            return []
        return self._greenhouses.get(island, [])

    def _column_greenhouse(self, position: Position) -> Greenhouse | None:
        for greenhouse in self._island_greenhouses(position):
            if greenhouse.covers_column(position):
                return greenhouse
        return None
