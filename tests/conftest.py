# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(seed=1234, grid_w=10, grid_h=10, render_show_hud=False)

@pytest.fixture
def state_factory(cfg):
    from core.grid import Bounds, Direction, Point
    from core.snake import Snake
    from core.snake_rules import GameState
    def make(w=10, h=10, body=None, direction=Direction.RIGHT, food=None, **overrides):
        # body/food given as (x, y) tuples; None keeps the initial layout
        state = GameState(cfg.with_(**overrides), Bounds(w, h))
        if body is not None:
            state.snake = Snake([Point(*p) for p in body], direction)
        else:
            state.snake.dir = state.snake.moved_dir = direction
        if food is not None:
            for p in list(state.food):
                state.food.remove(p)
            for p in food:
                state.food.add(Point(*p))
        return state
    return make

class ScriptedKeyboard:
    """Yields queued signals, one per poll, then None. Advances a fake clock by the poll window."""
    def __init__(self, signals=(), clock=None):
        self.signals = list(signals)
        self.clock = clock
        self.polls = 0

    def poll(self, timeout_ms):
        self.polls += 1
        if self.clock is not None:
            self.clock.advance(timeout_ms / 1000.0)
        return self.signals.pop(0) if self.signals else None

class FakeClock:
    def __init__(self, t=0.0):
        self.t = t
    def advance(self, dt):
        self.t += dt
    def __call__(self):
        return self.t

@pytest.fixture
def fake_clock():
    return FakeClock()

@pytest.fixture
def keyboard_factory(fake_clock):
    def make(signals=()):
        return ScriptedKeyboard(signals, clock=fake_clock)
    return make
