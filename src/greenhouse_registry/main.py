"""CLI entrypoint for inspecting greenhouse layouts."""

from __future__ import annotations

import typer
from rich import print

from greenhouse_registry.config import settings
from greenhouse_registry.layout import LayoutError, LoadedLayout, load_layout
from greenhouse_registry.lifecycle import IslandLifecycleBridge
from greenhouse_registry.models import Greenhouse, Position
from greenhouse_registry.telemetry.logging import configure_logging

app = typer.Typer(help="Greenhouse registry entrypoint")


def _load(layout_file: str | None) -> LoadedLayout:
    path = layout_file or settings.layout_path
    if not path:
        raise typer.BadParameter("Provide --layout-file or set GREENHOUSES_LAYOUT_PATH")
    configure_logging(settings.log_level)
    try:
        return load_layout(path)
    except LayoutError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _describe(greenhouse: Greenhouse | None) -> dict | None:
    if greenhouse is None:
        return None
    anchor = greenhouse.anchor
    return {
        "name": greenhouse.name,
        "anchor": None if anchor is None else [anchor.x, anchor.y, anchor.z],
        "floor": greenhouse.floor_height,
        "ceiling": greenhouse.ceiling_height,
    }


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "default_world": settings.default_world,
            "default_island_range": settings.default_island_range,
            "layout_path": settings.layout_path,
        }
    )


@app.command("load")
def load(layout_file: str = typer.Option(None, help="Path to a JSON layout file")) -> None:
    """Register every greenhouse in a layout and report the outcome."""
    loaded = _load(layout_file)
    print(
        {
            "results": [
                {"greenhouse": greenhouse.name, "result": result.value} for greenhouse, result in loaded.results
            ],
            "registered": [_describe(greenhouse) for greenhouse in loaded.registry.list_all()],
        }
    )


@app.command("probe")
def probe(
    x: float = typer.Option(..., help="X coordinate"),
    y: float = typer.Option(..., help="Y coordinate"),
    z: float = typer.Option(..., help="Z coordinate"),
    world: str = typer.Option(None, help="World name"),
    layout_file: str = typer.Option(None, help="Path to a JSON layout file"),
) -> None:
    """Query a position against the greenhouses of a layout."""
    loaded = _load(layout_file)
    position = Position(x, y, z, world=world or settings.default_world)
    island = loaded.claims.island_at(position)
    print(
        {
            "island": None if island is None else island.unique_id,
            "greenhouse": _describe(loaded.registry.get_greenhouse(position)),
            "in_greenhouse": loaded.registry.in_greenhouse(position),
            "above_greenhouse": loaded.registry.is_above_greenhouse(position),
        }
    )


@app.command("delete-island")
def delete_island(
    island_id: str = typer.Argument(..., help="Island id from the layout"),
    layout_file: str = typer.Option(None, help="Path to a JSON layout file"),
) -> None:
    """Delete an island and show which greenhouses remain registered."""
    loaded = _load(layout_file)
    IslandLifecycleBridge(loaded.registry).attach(loaded.claims)

    island = loaded.claims.get(island_id)
    if island is None:
        print({"error": f"Unknown island: {island_id}"})
        raise typer.Exit(code=1)

    loaded.claims.delete_island(island)
    print({"deleted": island_id, "remaining": [_describe(greenhouse) for greenhouse in loaded.registry.list_all()]})


if __name__ == "__main__":
    app()
