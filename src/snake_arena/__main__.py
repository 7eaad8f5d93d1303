from __future__ import annotations

import argparse
import logging

from .game import main as run_game


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="snake-arena", add_help=True)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement (default: random).",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging threshold for game events.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_game(seed=args.seed)


if __name__ == "__main__":
    main()
