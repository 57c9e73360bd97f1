# config.py
from dataclasses import dataclass, replace
from typing import Optional

MIN_GRID = 4

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    seed: Optional[int] = None

    # world (pygame backend; the terminal backend sizes itself from the tty)
    grid_w: int = 32
    grid_h: int = 20

    # timing
    tick_ms: int = 100          # one snake step per interval
    poll_ms: int = 50           # input wait per loop iteration, must be < tick_ms

    # food
    max_food: int = 15
    food_per_bite: int = 5
    spawn_attempts: int = 64    # random draws per slot before scanning free cells

    # gameplay
    allow_reversal: bool = True

    # render
    render_cell: int = 24
    render_title: str = "Snake"
    render_show_hud: bool = True

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if not 0 <= self.poll_ms < self.tick_ms:
            raise ValueError(f"poll_ms must be in [0, tick_ms), got {self.poll_ms} (tick_ms={self.tick_ms})")
        if self.max_food < 1:
            raise ValueError(f"max_food must be >= 1, got {self.max_food}")
        if self.food_per_bite < 0 or self.spawn_attempts < 0:
            raise ValueError("food_per_bite and spawn_attempts must be non-negative")
        if self.grid_w < MIN_GRID or self.grid_h < MIN_GRID:
            raise ValueError(f"grid must be at least {MIN_GRID}x{MIN_GRID}, got {self.grid_w}x{self.grid_h}")
        return self
