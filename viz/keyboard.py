# viz/keyboard.py
from __future__ import annotations
import curses
from typing import Optional
import pygame as pg
from core.interfaces import Signal

CURSES_KEYS = {
    curses.KEY_UP: Signal.UP,
    curses.KEY_DOWN: Signal.DOWN,
    curses.KEY_LEFT: Signal.LEFT,
    curses.KEY_RIGHT: Signal.RIGHT,
    ord("q"): Signal.QUIT,
    ord("Q"): Signal.QUIT,
}

PYGAME_KEYS = {
    pg.K_UP: Signal.UP,
    pg.K_DOWN: Signal.DOWN,
    pg.K_LEFT: Signal.LEFT,
    pg.K_RIGHT: Signal.RIGHT,
    pg.K_q: Signal.QUIT,
    pg.K_ESCAPE: Signal.QUIT,
}

def map_curses_key(code: int) -> Optional[Signal]:
    return CURSES_KEYS.get(code)

def map_pygame_event(e) -> Optional[Signal]:
    if e.type == pg.QUIT:
        return Signal.QUIT
    if e.type == pg.KEYDOWN:
        return PYGAME_KEYS.get(e.key)
    return None

class CursesKeyboard:
    def __init__(self, stdscr):
        self.stdscr = stdscr

    def poll(self, timeout_ms: int) -> Optional[Signal]:
        self.stdscr.timeout(timeout_ms)
        code = self.stdscr.getch()
        if code == -1:
            return None
        return map_curses_key(code)

class PygameKeyboard:
    def poll(self, timeout_ms: int) -> Optional[Signal]:
        e = pg.event.wait(timeout_ms) if timeout_ms > 0 else pg.event.poll()
        if e.type == pg.NOEVENT:
            return None
        return map_pygame_event(e)
