# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple

from .grid import Bounds, Direction, Point

class Outcome(Enum):
    MOVED = "moved"
    FOOD_EATEN = "food_eaten"
    COLLISION = "collision"

class Signal(Enum):
    """Key signals an input source can yield."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"

SIGNAL_TO_DIR = {
    Signal.UP: Direction.UP,
    Signal.DOWN: Direction.DOWN,
    Signal.LEFT: Direction.LEFT,
    Signal.RIGHT: Direction.RIGHT,
}

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Point, ...]   # head first
    food: Tuple[Point, ...]
    dir: Direction
    step_count: int
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Point:
        return self.snake[0]

class Renderer(Protocol):
    def open(self) -> None: ...
    def bounds(self) -> Bounds: ...
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...

class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> Optional[Signal]: ...
