#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py evaluate [--width W] [--height H] [--mines N | --percentage P]
                            [--games N] [--seed S] [--verbose]
"""
import argparse
import logging
import sys

from minefield import BoardConfig, InvalidConfig
from agents import RandomAgent, Evaluator


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from command-line options."""
    return BoardConfig(
        width=args.width,
        height=args.height,
        num_mines=args.mines,
        mine_percentage=args.percentage,
    )


def evaluate(args: argparse.Namespace) -> int:
    """Play games with the random agent and print results."""
    try:
        config = build_config(args)
    except InvalidConfig as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        return 2

    agent = RandomAgent(config.height, config.width, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(
        f"Board: {config.width}x{config.height} with "
        f"{config.resolved_mines} mines"
    )
    print(f"Evaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results.win_rate:.1%}")
    print(f"  Avg reward: {results.avg_reward:.2f}")
    print(f"  Avg steps: {results.avg_steps:.1f}")
    print(f"  Avg revealed: {results.avg_revealed:.1f} cells")
    return 0


def main(argv=None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper board engine"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine activity"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    eval_parser = subparsers.add_parser(
        "evaluate", help="Play games with the random agent"
    )
    eval_parser.add_argument("--width", type=int, default=8, help="Board columns")
    eval_parser.add_argument("--height", type=int, default=8, help="Board rows")
    eval_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    eval_parser.add_argument(
        "--percentage",
        type=int,
        default=None,
        help="Share of cells holding mines (overrides --mines)",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "evaluate":
        return evaluate(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
