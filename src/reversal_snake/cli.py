"""Command-line tools for Reversal Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reversal-snake",
        description="Reversal Snake headless simulation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play random-input games and report statistics.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--num-games", type=int, default=100)
    sim_p.add_argument("--max-ticks", type=int, default=500)
    sim_p.add_argument("--turn-probability", type=float, default=0.2)
    sim_p.add_argument("--board-size", type=int, default=None)
    sim_p.add_argument("--reversal-probability", type=float, default=None)
    sim_p.add_argument("--seed", type=int, default=42)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config to a JSON file.",
    )
    init_p.add_argument("path", help="Destination JSON file.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from dataclasses import replace

    from reversal_snake.config import GameConfig
    from reversal_snake.simulate import simulate_games

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.board_size is not None:
        overrides["board_size"] = args.board_size
    if args.reversal_probability is not None:
        overrides["reversal_probability"] = args.reversal_probability
    if overrides:
        config = replace(config, **overrides)

    result = simulate_games(
        num_games=args.num_games,
        max_ticks=args.max_ticks,
        turn_probability=args.turn_probability,
        config=config,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from reversal_snake.config import GameConfig

    GameConfig().save(args.path)
    print(f"Wrote default config to {args.path}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``reversal-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
