import pygame as pg
from core.projector import project
from viz.renderer_curses import CursesTerminal, interior_rows
from viz.renderer_pygame import PygameRenderer
import viz.renderer_colors as theme

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def test_interior_rows_drop_boundary_ring(state_factory):
    s = state_factory(w=6, h=5, body=[(1, 1)], food=[(4, 3)])
    assert interior_rows(project(s.snapshot())) == ["@...", "....", "...F"]

def test_curses_close_without_open_is_noop():
    term = CursesTerminal()
    term.close()
    assert term.stdscr is None

def test_pygame_draw_cells(cfg, state_factory):
    s = state_factory(body=[(5, 5), (4, 5)], food=[(3, 3)])
    c = cfg.render_cell
    surf = pg.Surface((10 * c, 10 * c))
    rend = PygameRenderer(cfg)
    rend.attach_surface(surf)
    rend.draw(s.snapshot())

    def at(x, y):
        return _rgb(surf.get_at((x * c + c // 2, y * c + c // 2)))

    assert at(5, 5) == theme.HEAD
    assert at(4, 5) == theme.BODY
    assert at(3, 3) == theme.FOOD
    assert at(7, 7) == theme.BG
    assert at(0, 4) == theme.WALL
    assert at(9, 9) == theme.WALL

def test_pygame_bounds_from_config(cfg):
    b = PygameRenderer(cfg).bounds()
    assert (b.width, b.height) == (cfg.grid_w, cfg.grid_h)
