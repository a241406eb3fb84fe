"""
geometry.py — Wraparound arithmetic on an N×N torus.

Pure functions, no state.
"""

import random

from .model import Position


def wrap(coord: int, size: int) -> int:
    """Map any integer onto [0, size)."""
    return coord % size


def step(position: Position, direction, size: int) -> Position:
    """Move one cell along `direction`, reappearing on the opposite edge."""
    x, y = position
    dx, dy = direction
    return wrap(x + dx, size), wrap(y + dy, size)


def random_cell(rng: random.Random, size: int, exclude=()) -> Position:
    """
    Uniformly random cell of the board.

    With a non-empty `exclude`, keeps drawing until the cell is outside it.
    """
    blocked = set(exclude)
    if len(blocked) >= size * size:
        raise ValueError("no free cell left on the board")
    while True:
        pos = (rng.randrange(size), rng.randrange(size))
        if pos not in blocked:
            return pos
