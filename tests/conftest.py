import os
import random

import pytest

# Let pygame draw without a real display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from torus_snake.config import GameSettings  # noqa: E402
from torus_snake.engine import GameEngine  # noqa: E402


@pytest.fixture
def engine():
    """Engine with default settings and a seeded food RNG."""
    return GameEngine(rng=random.Random(1234))


@pytest.fixture
def make_engine():
    """Factory for engines with custom settings."""
    def _make(seed=1234, **overrides):
        return GameEngine(GameSettings(**overrides), rng=random.Random(seed))
    return _make
