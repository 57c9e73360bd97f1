import argparse
import curses

from config import AppConfig
from runners.run_snake import main as snake

DEFAULTS = AppConfig()

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="snake")
    p.add_argument("mode", nargs="?", default="terminal", choices=["terminal", "pygame"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick-ms", type=int, default=DEFAULTS.tick_ms)
    p.add_argument("--poll-ms", type=int, default=DEFAULTS.poll_ms)
    p.add_argument("--grid", type=int, nargs=2, metavar=("W", "H"), default=None,
                   help="grid size for the pygame window")
    p.add_argument("--no-reversal", action="store_true",
                   help="ignore 180 degree turns instead of dying on the next tick")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = DEFAULTS.with_(
        seed=args.seed,
        tick_ms=args.tick_ms,
        poll_ms=args.poll_ms,
        allow_reversal=not args.no_reversal,
    )
    if args.grid:
        cfg = cfg.with_(grid_w=args.grid[0], grid_h=args.grid[1])
    return cfg

def fatal_errors(mode: str) -> tuple:
    errors = (curses.error, OSError, ValueError)
    if mode == "pygame":
        # only the window backend pays for SDL startup
        import pygame as pg
        errors += (pg.error,)
    return errors

def main(argv=None):
    args = parse_args(argv)
    try:
        snake(build_config(args), backend=args.mode)
    except fatal_errors(args.mode) as e:
        raise SystemExit(f"snake: {e}")

if __name__ == "__main__":
    main()
