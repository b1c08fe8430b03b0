"""Two-dimensional X/Z areas that greenhouses occupy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol


class Footprint(Protocol):
    """An area on the X/Z plane."""

    def contains(self, x: float, z: float) -> bool:
        """Return True when the point lies inside the area."""

    def intersects(self, other: Footprint) -> bool:
        """Return True when the two areas share a region of positive size."""


@dataclass(frozen=True, slots=True)
class RectFootprint:
    """Axis-aligned rectangle, inclusive of its min edges and exclusive of its max edges."""

    min_x: float
    min_z: float
    max_x: float
    max_z: float

    @classmethod
    def from_corners(cls, x1: float, z1: float, x2: float, z2: float) -> RectFootprint:
        return cls(min(x1, x2), min(z1, z2), max(x1, x2), max(z1, z2))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_z - self.min_z

    def is_empty(self) -> bool:
        return self.width <= 0 or self.depth <= 0

    def contains(self, x: float, z: float) -> bool:
        return self.min_x <= x < self.max_x and self.min_z <= z < self.max_z

    def intersects(self, other: Footprint) -> bool:
        if self.is_empty():
            return False
        if isinstance(other, RectFootprint):
            if other.is_empty():
                return False
            return (
                self.min_x < other.max_x
                and other.min_x < self.max_x
                and self.min_z < other.max_z
                and other.min_z < self.max_z
            )
        if isinstance(other, CellFootprint):
            return other.intersects(self)
        # Footprints of other types are probed one-sided through their contains().
        return any(other.contains(x, z) for x, z in self.sample_points())

    def sample_points(self) -> Iterable[tuple[float, float]]:
        """Centre of the part of each block column that lies inside the rectangle."""
        for bx in range(math.floor(self.min_x), math.ceil(self.max_x)):
            x = (max(bx, self.min_x) + min(bx + 1, self.max_x)) / 2
            for bz in range(math.floor(self.min_z), math.ceil(self.max_z)):
                yield x, (max(bz, self.min_z) + min(bz + 1, self.max_z)) / 2


@dataclass(frozen=True, slots=True)
class CellFootprint:
    """Set of unit X/Z cells, each identified by its minimum corner."""

    cells: frozenset[tuple[int, int]]

    @classmethod
    def of(cls, cells: Iterable[tuple[int, int]]) -> CellFootprint:
        return cls(frozenset((int(x), int(z)) for x, z in cells))

    @classmethod
    def from_rect(cls, rect: RectFootprint) -> CellFootprint:
        """Cover every whole cell that lies inside ``rect``."""
        xs = range(math.ceil(rect.min_x), math.floor(rect.max_x))
        zs = range(math.ceil(rect.min_z), math.floor(rect.max_z))
        return cls(frozenset((x, z) for x in xs for z in zs))

    def __len__(self) -> int:
        return len(self.cells)

    def contains(self, x: float, z: float) -> bool:
        return (math.floor(x), math.floor(z)) in self.cells

    def intersects(self, other: Footprint) -> bool:
        if isinstance(other, CellFootprint):
            return not self.cells.isdisjoint(other.cells)
        if isinstance(other, RectFootprint):
            return any(other.intersects(RectFootprint(x, z, x + 1, z + 1)) for x, z in self.cells)
        return any(other.contains(x + 0.5, z + 0.5) for x, z in self.cells)
