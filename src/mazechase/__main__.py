from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .app import run_auto, run_gui, run_headless
from .config import load_config
from .exceptions import ConfigurationError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _level_for(verbosity: int) -> int | None:
    if verbosity == 1:
        return logging.INFO
    if verbosity >= 2:
        return logging.DEBUG
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mazechase", description="Maze Chase - grid maze arcade game")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for maze and adversary randomness")
    parser.add_argument("--width", type=int, default=None, help="Maze width in cells")
    parser.add_argument("--height", type=int, default=None, help="Maze height in cells")
    parser.add_argument("--max-ticks", type=int, default=None, help="Headless: stop after N ticks")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    configure_logging(default_level=logging.WARNING, level=_level_for(args.verbose))

    try:
        config = load_config(args.config, seed=args.seed, width=args.width, height=args.height)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    # CLI flags win over MAZECHASE_HEADLESS
    if args.gui:
        return run_gui(config)
    if args.headless:
        return run_headless(config, max_ticks=args.max_ticks)
    return run_auto(config, max_ticks=args.max_ticks)


if __name__ == "__main__":
    sys.exit(main())
