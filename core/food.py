# core/food.py
from __future__ import annotations
import random
from typing import Iterable, Iterator, List, Optional

from .grid import Bounds, Point
from .snake import Snake

class FoodSet:
    """Capacity-bounded set of food cells placed on free interior cells."""

    def __init__(
        self,
        bounds: Bounds,
        rng: Optional[random.Random] = None,
        max_food: int = 15,
        per_bite: int = 5,
        spawn_attempts: int = 64,
        cells: Iterable[Point] = (),
    ):
        self.bounds = bounds
        self.rng = rng or random.Random()
        self.max_food = max_food
        self.per_bite = per_bite
        self.spawn_attempts = spawn_attempts
        self._cells: List[Point] = []
        for p in cells:
            self.add(Point(*p))

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._cells)

    def __contains__(self, p) -> bool:
        return p in self._cells

    def add(self, p: Point) -> None:
        if p in self._cells:
            raise ValueError(f"food already at {p}")
        if len(self._cells) >= self.max_food:
            raise ValueError(f"food set is full ({self.max_food})")
        self._cells.append(p)

    def remove(self, p: Point) -> bool:
        try:
            self._cells.remove(p)
        except ValueError:
            return False
        return True

    def replenish(self, count: int, snake: Snake) -> int:
        """Place up to `count` new items, capped by remaining capacity. Returns how many were placed."""
        budget = min(count, self.max_food - len(self._cells))
        placed = 0
        for _ in range(max(0, budget)):
            p = self._sample(snake)
            if p is None:
                break  # grid saturated
            self._cells.append(p)
            placed += 1
        return placed

    def _is_free(self, p: Point, snake: Snake) -> bool:
        return p not in snake.body and p not in self._cells

    def _sample(self, snake: Snake) -> Optional[Point]:
        b = self.bounds
        for _ in range(self.spawn_attempts):
            p = Point(self.rng.randrange(1, b.width - 1), self.rng.randrange(1, b.height - 1))
            if self._is_free(p, snake):
                return p
        free = [p for p in b.interior() if self._is_free(p, snake)]
        if not free:
            return None
        return self.rng.choice(free)
