"""JSON layout files describing islands and greenhouses for offline runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from .adapters.island_claims import IslandClaims
from .config import settings
from .footprint import CellFootprint, Footprint, RectFootprint
from .models import AddResult, Greenhouse, Island, Position
from .registry import GreenhouseRegistry


class LayoutError(ValueError):
    """Raised when a layout file cannot be read or does not validate."""


class IslandSpec(BaseModel):
    id: str
    center: tuple[int, int]
    range: int = Field(default_factory=lambda: settings.default_island_range, ge=0)
    world: str = Field(default_factory=lambda: settings.default_world)
    owner: str | None = None


class FootprintSpec(BaseModel):
    rect: tuple[float, float, float, float] | None = None
    cells: list[tuple[int, int]] | None = None

    @model_validator(mode="after")
    def _exactly_one_shape(self) -> FootprintSpec:
        if (self.rect is None) == (self.cells is None):
            raise ValueError("footprint needs exactly one of 'rect' or 'cells'")
        return self

    def build(self) -> Footprint:
        if self.rect is not None:
            return RectFootprint.from_corners(*self.rect)
        return CellFootprint.of(self.cells or [])


class GreenhouseSpec(BaseModel):
    name: str | None = None
    anchor: tuple[float, float, float] | None = None
    world: str = Field(default_factory=lambda: settings.default_world)
    footprint: FootprintSpec
    floor: int
    ceiling: int

    @model_validator(mode="after")
    def _floor_below_ceiling(self) -> GreenhouseSpec:
        if self.floor > self.ceiling:
            raise ValueError(f"floor {self.floor} is above ceiling {self.ceiling}")
        return self

    def build(self) -> Greenhouse:
        anchor = None
        if self.anchor is not None:
            anchor = Position(*self.anchor, world=self.world)
        return Greenhouse(
            anchor=anchor,
            footprint=self.footprint.build(),
            floor_height=self.floor,
            ceiling_height=self.ceiling,
            name=self.name,
        )


class LayoutSpec(BaseModel):
    islands: list[IslandSpec] = Field(default_factory=list)
    greenhouses: list[GreenhouseSpec] = Field(default_factory=list)


@dataclass(slots=True)
class LoadedLayout:
    claims: IslandClaims
    registry: GreenhouseRegistry
    results: list[tuple[Greenhouse, AddResult]] = field(default_factory=list)


def parse_layout(text: str) -> LayoutSpec:
    try:
        return LayoutSpec.model_validate(json.loads(text))
    except json.JSONDecodeError as exc:
        raise LayoutError(f"Layout is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise LayoutError(f"Layout does not validate: {exc}") from exc


def build_layout(spec: LayoutSpec) -> LoadedLayout:
    """Claim every island, then register greenhouses in file order."""
    claims = IslandClaims()
    for island in spec.islands:
        try:
            claims.claim(
                Island(
                    unique_id=island.id,
                    center_x=island.center[0],
                    center_z=island.center[1],
                    protection_range=island.range,
                    world=island.world,
                    owner=island.owner,
                )
            )
        except ValueError as exc:
            raise LayoutError(str(exc)) from exc

    registry = GreenhouseRegistry(claims)
    loaded = LoadedLayout(claims=claims, registry=registry)
    for greenhouse_spec in spec.greenhouses:
        greenhouse = greenhouse_spec.build()
        loaded.results.append((greenhouse, registry.add_greenhouse(greenhouse)))
    return loaded


def load_layout(path: str | Path) -> LoadedLayout:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise LayoutError(f"Unable to read layout {path}: {exc}") from exc
    return build_layout(parse_layout(text))
