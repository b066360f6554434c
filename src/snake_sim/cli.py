"""Command-line entry point: load a board, tick it, write it back out."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from snake_sim.board import default_state
from snake_sim.config import FOOD_PLACERS, SimulationConfig
from snake_sim.engine import TickEngine
from snake_sim.errors import SnakeSimError
from snake_sim.food import make_food_placer
from snake_sim.parser import initialize_snakes, load_board, load_board_file
from snake_sim.serializer import print_board, save_board

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-sim",
        description="Advance a snake board by one or more ticks.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-i", dest="input", type=str, default=None, metavar="FILENAME",
        help="Board file to load (default: the built-in board).",
    )
    source.add_argument(
        "--stdin", action="store_true",
        help="Read the board from standard input.",
    )
    parser.add_argument(
        "-o", dest="output", type=str, default=None, metavar="FILENAME",
        help="Write the resulting board here (default: standard output).",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--food", type=str, default=None, choices=FOOD_PLACERS,
        help="Food placement after a snake eats; \"random\" is unseeded "
        "unless --seed is given.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> SimulationConfig:
    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )

    overrides = {
        name: getattr(args, name)
        for name in ("ticks", "seed", "food")
        if getattr(args, name) is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def _run(args: argparse.Namespace, config: SimulationConfig) -> None:
    if args.input is not None:
        board = load_board_file(args.input)
        snakes = initialize_snakes(board)
    elif args.stdin:
        board = load_board(sys.stdin)
        snakes = initialize_snakes(board)
    else:
        board, snakes = default_state()

    engine = TickEngine(board, snakes, make_food_placer(config.food, config.seed))
    engine.run(config.ticks)

    if args.output is not None:
        save_board(board, args.output)
    else:
        print_board(board, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-sim`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = _resolve_config(args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Invalid config: %s", exc)
        return 1

    try:
        _run(args, config)
    except SnakeSimError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
