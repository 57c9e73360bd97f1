# core/projector.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Snapshot

SNAKE = "@"
FOOD = "F"
EMPTY = "."

def project(s: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) array of single characters. Snake is drawn over food."""
    grid = np.full((s.grid_h, s.grid_w), EMPTY, dtype="<U1")
    for (x, y) in s.food:
        grid[y, x] = FOOD
    for (x, y) in s.snake:
        grid[y, x] = SNAKE
    return grid

def to_lines(grid: np.ndarray) -> List[str]:
    return ["".join(row) for row in grid]
