# core/snake.py  (movement + collision, no I/O)
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, TYPE_CHECKING

from .grid import Bounds, Direction, Point
from .interfaces import Outcome

if TYPE_CHECKING:
    from .food import FoodSet

class Snake:
    def __init__(self, body: Iterable[Point], direction: Direction = Direction.RIGHT):
        self.body: Deque[Point] = deque(Point(*p) for p in body)
        if not self.body:
            raise ValueError("snake body must not be empty")
        self.dir = direction
        self.moved_dir = direction  # heading of the last committed step

    @classmethod
    def spawn(cls, bounds: Bounds) -> "Snake":
        return cls([bounds.center], Direction.RIGHT)

    @property
    def head(self) -> Point:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.body)

    def __contains__(self, p) -> bool:
        return p in self.body

    def next_head(self) -> Optional[Point]:
        """Cell one step ahead, or None if the step would leave the non-negative quadrant."""
        x, y = self.head
        if (self.dir.dx < 0 and x == 0) or (self.dir.dy < 0 and y == 0):
            return None
        return Point(x + self.dir.dx, y + self.dir.dy)

    def turn(self, direction: Direction, allow_reversal: bool = True) -> bool:
        # a one-segment snake has no neck to run into
        if not allow_reversal and len(self.body) > 1 and direction is self.moved_dir.opposite:
            return False
        self.dir = direction
        return True

def collision_reason(snake: Snake, bounds: Bounds, head: Optional[Point]) -> Optional[str]:
    """'wall' / 'self' if stepping onto `head` is fatal, else None."""
    if head is None or not bounds.contains(head) or bounds.on_ring(head):
        return "wall"
    # tail is still in the body at this point, so chasing it is fatal too
    if head in snake.body:
        return "self"
    return None

def advance(snake: Snake, bounds: Bounds, food: "FoodSet") -> Outcome:
    head = snake.next_head()
    if collision_reason(snake, bounds, head) is not None:
        return Outcome.COLLISION

    snake.body.appendleft(head)
    snake.moved_dir = snake.dir
    if food.remove(head):
        food.replenish(food.per_bite, snake)
        return Outcome.FOOD_EATEN
    snake.body.pop()
    return Outcome.MOVED
