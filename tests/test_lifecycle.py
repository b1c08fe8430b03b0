from __future__ import annotations

from greenhouse_registry.adapters import EventPriority, IslandClaims, IslandDeleteEvent
from greenhouse_registry.footprint import RectFootprint
from greenhouse_registry.lifecycle import IslandLifecycleBridge
from greenhouse_registry.models import AddResult, Greenhouse, Island, Position
from greenhouse_registry.registry import GreenhouseRegistry


def _setup() -> tuple[IslandClaims, GreenhouseRegistry, Island, Island]:
    home = Island(unique_id="home", center_x=0, center_z=0, protection_range=50)
    neighbour = Island(unique_id="neighbour", center_x=200, center_z=0, protection_range=50)
    claims = IslandClaims([home, neighbour])
    registry = GreenhouseRegistry(claims)
    IslandLifecycleBridge(registry).attach(claims)
    return claims, registry, home, neighbour


def _greenhouse(x: int, z: int) -> Greenhouse:
    return Greenhouse(
        anchor=Position(x, 60, z),
        footprint=RectFootprint(x, z, x + 10, z + 10),
        floor_height=60,
        ceiling_height=80,
    )


def test_deleting_island_discards_its_greenhouses() -> None:
    claims, registry, home, _ = _setup()
    kept = _greenhouse(200, 0)
    assert registry.add_greenhouse(_greenhouse(0, 0)) == AddResult.SUCCESS
    assert registry.add_greenhouse(kept) == AddResult.SUCCESS

    claims.delete_island(home)

    assert registry.list_all() == [kept]
    assert registry.greenhouses_on(home) == []
    for x in range(0, 10):
        assert registry.get_greenhouse(Position(x, 70, x)) is None


def test_cancelled_deletion_keeps_greenhouses() -> None:
    _, registry, home, _ = _setup()
    greenhouse = _greenhouse(0, 0)
    registry.add_greenhouse(greenhouse)

    IslandLifecycleBridge(registry).on_island_delete(IslandDeleteEvent(island=home, cancelled=True))

    assert registry.list_all() == [greenhouse]


def test_repeated_notifications_are_harmless() -> None:
    _, registry, home, _ = _setup()
    greenhouse = _greenhouse(0, 0)
    registry.add_greenhouse(greenhouse)
    registry.remove_greenhouse(greenhouse)
    bridge = IslandLifecycleBridge(registry)

    bridge.on_island_delete(IslandDeleteEvent(island=home))
    bridge.on_island_delete(IslandDeleteEvent(island=home))

    assert registry.list_all() == []


class SingleIslandLookup:
    def __init__(self, island: object) -> None:
        self.island = island

    def island_at(self, position: Position) -> object:
        return self.island


def test_bridge_accepts_host_island_objects() -> None:
    host_island = ("host", 7)
    registry = GreenhouseRegistry(SingleIslandLookup(host_island))
    registry.add_greenhouse(_greenhouse(0, 0))

    IslandLifecycleBridge(registry).on_island_delete(IslandDeleteEvent(island=host_island))

    assert len(registry) == 0


def test_deletion_vetoed_after_bridge_subscribed_keeps_greenhouses() -> None:
    claims, registry, home, _ = _setup()
    greenhouse = _greenhouse(0, 0)
    registry.add_greenhouse(greenhouse)

    def _veto(event: IslandDeleteEvent) -> None:
        event.cancelled = True

    claims.subscribe(_veto)
    claims.delete_island(home)

    assert claims.get("home") is home
    assert registry.list_all() == [greenhouse]


def test_monitor_handlers_only_see_deletions_that_go_ahead() -> None:
    home = Island(unique_id="home", center_x=0, center_z=0, protection_range=50)
    claims = IslandClaims([home])
    monitored: list[IslandDeleteEvent] = []
    claims.subscribe(monitored.append, priority=EventPriority.MONITOR)

    claims.delete_island(home, cancelled=True)
    assert monitored == []

    event = claims.delete_island(home)
    assert monitored == [event]
    assert claims.get("home") is None
