# Command-line launcher for the Snake window.
from __future__ import annotations

import argparse
import logging

try:
    from .game_logic import (
        MAX_SPEED_MS,
        MIN_SPEED_MS,
        PRESETS,
        SnakeConfig,
        WallPolicy,
        preset_config,
    )
except ImportError:
    from game_logic import (
        MAX_SPEED_MS,
        MIN_SPEED_MS,
        PRESETS,
        SnakeConfig,
        WallPolicy,
        preset_config,
    )


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--variant", default="classic", choices=tuple(PRESETS))
    parser.add_argument("--wrap", action="store_true", help="Start with wrap-around walls instead of lethal ones.")
    parser.add_argument("--grid-size", type=int, default=None, help="Board side length in cells.")
    parser.add_argument("--cell-size", type=int, default=None, help="Cell side length in pixels.")
    parser.add_argument(
        "--speed",
        type=int,
        default=None,
        help=f"Starting tick interval in ms ({MIN_SPEED_MS}-{MAX_SPEED_MS}).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS)
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SnakeConfig:
    """Apply command-line overrides on top of the chosen preset."""
    overrides = {}
    if args.grid_size is not None:
        overrides["grid_size"] = args.grid_size
    if args.cell_size is not None:
        overrides["cell_size"] = args.cell_size
    if args.speed is not None:
        overrides["speed_ms"] = args.speed
    if args.wrap:
        overrides["wall_policy"] = WallPolicy.WRAP_AROUND
    return preset_config(args.variant, **overrides)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = config_from_args(args)
    except ValueError as exc:
        raise SystemExit(f"Invalid settings: {exc}")

    # Tk is only needed once a window opens.
    try:
        from .snake_gui import run_player_gui
    except ImportError:
        from snake_gui import run_player_gui

    run_player_gui(config, variant=args.variant, seed=args.seed)


if __name__ == "__main__":
    main()
