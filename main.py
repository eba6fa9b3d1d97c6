#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--seed N] [--verbose]
"""
import argparse
import logging

from minesweeper.session import GameSession
from minesweeper.shell import run


def main() -> None:
    """Parse arguments and start the interactive game."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run(GameSession(seed=args.seed))


if __name__ == "__main__":
    main()
