"""
main.py — Entry point.

Run with:
    python main.py [--seed N] [--log-level DEBUG]

Requires:
    pip install pygame
"""

import argparse
import logging
import random

from torus_snake.controller import GameController
from torus_snake.engine import GameEngine


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a 16x16 torus")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (default: random)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    engine = GameEngine(rng=random.Random(args.seed))
    GameController(engine).run()


if __name__ == "__main__":
    main()
