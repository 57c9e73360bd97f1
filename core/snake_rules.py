# core/snake_rules.py  (pure rules, no curses/pygame)
from __future__ import annotations
import random
from typing import Optional

from config import AppConfig
from .food import FoodSet
from .grid import Bounds, Point
from .interfaces import SIGNAL_TO_DIR, Outcome, Signal, Snapshot
from .snake import Snake, advance, collision_reason

class GameState:
    """Snake + food + bounds. Running until a collision or quit, then absorbing."""

    def __init__(self, cfg: AppConfig, bounds: Bounds):
        self.cfg = cfg
        self.bounds = bounds
        self.rng = random.Random(cfg.seed)
        self._reset_state()

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)
        self.food.rng = self.rng

    def _reset_state(self):
        b = self.bounds
        self.snake = Snake.spawn(b)
        self.food = FoodSet(
            b,
            rng=self.rng,
            max_food=self.cfg.max_food,
            per_bite=self.cfg.food_per_bite,
            spawn_attempts=self.cfg.spawn_attempts,
            cells=[Point(b.width // 3, b.height // 3)],
        )
        self.step_count = 0
        self.terminated = False
        self.reason: Optional[str] = None

    def reset(self) -> Snapshot:
        self._reset_state()
        return self.snapshot()

    def tick(self) -> Optional[Outcome]:
        """Advance one step. Returns None once terminated."""
        if self.terminated:
            return None
        outcome = advance(self.snake, self.bounds, self.food)
        if outcome is Outcome.COLLISION:
            # body is untouched on collision, so the reason can be read back
            self.terminated = True
            self.reason = collision_reason(self.snake, self.bounds, self.snake.next_head())
            return outcome
        self.step_count += 1
        return outcome

    def apply_input(self, signal: Optional[Signal]) -> None:
        if self.terminated or signal is None:
            return
        if signal is Signal.QUIT:
            self.terminated, self.reason = True, "quit"
            return
        direction = SIGNAL_TO_DIR.get(signal)
        if direction is not None:
            self.snake.turn(direction, allow_reversal=self.cfg.allow_reversal)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.body),
            food=tuple(self.food),
            dir=self.snake.dir,
            step_count=self.step_count,
            terminated=self.terminated,
            reason=self.reason,
            grid_w=self.bounds.width,
            grid_h=self.bounds.height,
        )
