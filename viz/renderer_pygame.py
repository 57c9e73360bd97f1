# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from config import AppConfig
from core.grid import Bounds
from core.interfaces import Snapshot
from core.projector import FOOD, SNAKE, project
import viz.renderer_colors as theme

CELL_COLORS = {SNAKE: theme.BODY, FOOD: theme.FOOD}

class PygameRenderer:
    def __init__(self, cfg: AppConfig):
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf: Optional[pg.Surface] = None
        self._font: Optional[pg.font.Font] = None
        self._auto_flip = True

    def open(self) -> None:
        pg.init()
        pg.display.set_caption(self.cfg.render_title)
        self.surf = pg.display.set_mode((self.cfg.grid_w * self.cell, self.cfg.grid_h * self.cell))
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface) -> None:
        if not pg.get_init():
            pg.init()
        self.surf = surface
        self._auto_flip = False  # embedding surface owns the flip

    def bounds(self) -> Bounds:
        return Bounds(self.cfg.grid_w, self.cfg.grid_h)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        # boundary ring
        pg.draw.rect(surf, theme.WALL, pg.Rect(0, 0, s.grid_w * c, s.grid_h * c), width=c)

        grid = project(s)
        for y, row in enumerate(grid):
            for x, ch in enumerate(row):
                col = CELL_COLORS.get(ch)
                if col is not None:
                    pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))
        hx, hy = s.head
        pg.draw.rect(surf, theme.HEAD, pg.Rect(hx * c, hy * c, c, c))

        if self.cfg.render_show_hud:
            if self._font is None:
                self._font = pg.font.SysFont(None, 22)
            txt = self._font.render(
                f"Length: {len(s.snake)}   Ticks: {s.step_count}   Dir: {s.dir.name}   {s.reason or ''}",
                True, theme.TEXT
            )
            surf.blit(txt, (6, 4))

        if self._auto_flip:
            pg.display.flip()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._font = None
