# runners/run_snake.py
from __future__ import annotations
import time
from typing import Callable
from config import AppConfig
from core.interfaces import InputSource, Renderer, Snapshot
from core.snake_rules import GameState

def run(
    state: GameState,
    renderer: Renderer,
    keyboard: InputSource,
    cfg: AppConfig,
    clock: Callable[[], float] = time.monotonic,
) -> Snapshot:
    """Render -> poll input -> tick when due, until the state terminates."""
    interval = cfg.tick_ms / 1000.0
    last_tick = clock()
    while not state.terminated:
        renderer.draw(state.snapshot())
        state.apply_input(keyboard.poll(cfg.poll_ms))

        now = clock()
        if now - last_tick >= interval:
            state.tick()
            last_tick = now

    final = state.snapshot()
    if final.reason != "quit":
        renderer.draw(final)
    return final

def run_terminal(cfg: AppConfig) -> Snapshot:
    from viz.keyboard import CursesKeyboard
    from viz.renderer_curses import CursesTerminal

    with CursesTerminal() as term:
        state = GameState(cfg, term.bounds())
        return run(state, term, CursesKeyboard(term.stdscr), cfg)

def run_pygame(cfg: AppConfig) -> Snapshot:
    from viz.keyboard import PygameKeyboard
    from viz.renderer_pygame import PygameRenderer

    rend = PygameRenderer(cfg)
    try:
        rend.open()
        state = GameState(cfg, rend.bounds())
        return run(state, rend, PygameKeyboard(), cfg)
    finally:
        rend.close()

def main(cfg: AppConfig, backend: str = "terminal") -> Snapshot:
    cfg.validate()
    final = run_pygame(cfg) if backend == "pygame" else run_terminal(cfg)
    print("=== Snake ===")
    print(f"grid: {final.grid_w}x{final.grid_h}  length: {len(final.snake)}  ticks: {final.step_count}  reason: {final.reason}")
    return final
