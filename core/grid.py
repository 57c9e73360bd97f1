# core/grid.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple

from config import MIN_GRID

class Point(NamedTuple):
    x: int
    y: int

class Direction(Enum):
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

@dataclass(frozen=True)
class Bounds:
    """Fixed rectangular extent. The outermost ring of cells is wall."""
    width: int
    height: int

    def __post_init__(self):
        if self.width < MIN_GRID or self.height < MIN_GRID:
            raise ValueError(f"bounds must be at least {MIN_GRID}x{MIN_GRID}, got {self.width}x{self.height}")

    @property
    def center(self) -> Point:
        return Point(self.width // 2, self.height // 2)

    def contains(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def on_ring(self, p: Point) -> bool:
        return p.x in (0, self.width - 1) or p.y in (0, self.height - 1)

    def is_interior(self, p: Point) -> bool:
        return self.contains(p) and not self.on_ring(p)

    def interior(self) -> Iterator[Point]:
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                yield Point(x, y)

    def interior_size(self) -> int:
        return (self.width - 2) * (self.height - 2)
