# viz/renderer_headless.py
from __future__ import annotations
from typing import List
from core.grid import Bounds
from core.interfaces import Snapshot
from core.projector import project, to_lines

class HeadlessRenderer:
    """Keeps projected frames in memory instead of drawing them."""
    def __init__(self, grid_w: int, grid_h: int):
        self._bounds = Bounds(grid_w, grid_h)
        self.frames: List[List[str]] = []

    def open(self) -> None:
        pass

    def bounds(self) -> Bounds:
        return self._bounds

    def draw(self, snap: Snapshot) -> None:
        self.frames.append(to_lines(project(snap)))

    def close(self) -> None:
        pass
