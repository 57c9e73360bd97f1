# viz/renderer_curses.py
from __future__ import annotations
import curses
from typing import List, Optional
import numpy as np
from core.grid import Bounds
from core.interfaces import Snapshot
from core.projector import project

def interior_rows(grid: np.ndarray) -> List[str]:
    """Rows of the grid without the boundary ring (the border is drawn there instead)."""
    return ["".join(row[1:-1]) for row in grid[1:-1]]

class CursesTerminal:
    """Raw-mode, alternate-screen terminal session. Use as a context manager so
    the terminal is restored on any exit path."""

    def __init__(self):
        self.stdscr: Optional["curses.window"] = None

    def __enter__(self) -> "CursesTerminal":
        try:
            self.open()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def open(self) -> None:
        self.stdscr = curses.initscr()
        curses.noecho()
        curses.raw()
        self.stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor

    def bounds(self) -> Bounds:
        assert self.stdscr is not None, "Terminal not opened"
        rows, cols = self.stdscr.getmaxyx()
        return Bounds(cols, rows)

    def draw(self, s: Snapshot) -> None:
        assert self.stdscr is not None, "Terminal not opened"
        scr = self.stdscr
        scr.erase()
        scr.border()
        for y, line in enumerate(interior_rows(project(s)), start=1):
            scr.addstr(y, 1, line)
        scr.noutrefresh()
        curses.doupdate()

    def close(self) -> None:
        if self.stdscr is None:
            return
        try:
            self.stdscr.keypad(False)
            curses.noraw()
            curses.echo()
        finally:
            curses.endwin()
            self.stdscr = None
