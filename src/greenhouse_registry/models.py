from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .footprint import Footprint


class AddResult(str, Enum):
    """Outcome of registering a greenhouse."""

    SUCCESS = "success"
    FAIL_OVERLAPPING = "fail_overlapping"
    FAIL_NO_ISLAND = "fail_no_island"
    NULL = "null"


@dataclass(frozen=True, slots=True)
class Position:
    x: float
    y: float
    z: float
    world: str = "world"

    @property
    def block_x(self) -> int:
        return math.floor(self.x)

    @property
    def block_y(self) -> int:
        return math.floor(self.y)

    @property
    def block_z(self) -> int:
        return math.floor(self.z)


@dataclass(eq=False, slots=True)
class Island:
    """A player-claimed square parcel of a world.

    Islands compare and hash by identity so two claims with the same
    geometry stay distinct registry keys.
    """

    unique_id: str
    center_x: int
    center_z: int
    protection_range: int
    world: str = "world"
    owner: str | None = None

    def __post_init__(self) -> None:
        if self.protection_range < 0:
            raise ValueError(f"Island protection range must not be negative: {self.protection_range}")

    def claims(self, position: Position) -> bool:
        return (
            position.world == self.world
            and self.center_x - self.protection_range <= position.block_x < self.center_x + self.protection_range
            and self.center_z - self.protection_range <= position.block_z < self.center_z + self.protection_range
        )


@dataclass(eq=False, slots=True)
class Greenhouse:
    """A registered volume: an X/Z footprint between a floor and a ceiling height."""

    anchor: Position | None
    footprint: Footprint
    floor_height: int
    ceiling_height: int
    name: str | None = None

    def __post_init__(self) -> None:
        if self.floor_height > self.ceiling_height:
            raise ValueError(
                f"Greenhouse floor {self.floor_height} is above its ceiling {self.ceiling_height}"
            )

    @property
    def height(self) -> int:
        return self.ceiling_height - self.floor_height + 1

    def covers_column(self, position: Position) -> bool:
        return self.footprint.contains(position.x, position.z)

    def contains(self, position: Position) -> bool:
        return self.covers_column(position) and self.floor_height <= position.block_y <= self.ceiling_height
