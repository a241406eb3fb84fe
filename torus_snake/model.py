"""
model.py — Model layer.

Value types shared by the engine and the presentation shell.
Zero rendering, zero input handling, zero mutable state.

Classes:
    Direction             — immutable (dx, dy) unit vector
    GameState             — immutable snapshot of one instant of the game
    InvalidDirectionError — raised for vectors outside the four headings
"""

from dataclasses import dataclass, replace

Position = tuple[int, int]


class InvalidDirectionError(ValueError):
    """A heading that is not one of the four unit vectors."""


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction. Compares equal to a plain (dx, dy) tuple."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        # bool is an int subclass and 1.0 == 1, so check the type exactly.
        if type(x) is not int or type(y) is not int or (x, y) not in _UNIT_VECTORS:
            raise InvalidDirectionError(
                f"({x}, {y}) is not a unit direction; expected one of {sorted(_UNIT_VECTORS)}"
            )
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def of(cls, value) -> "Direction":
        """Accept a Direction or any (dx, dy) pair."""
        if isinstance(value, Direction):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise InvalidDirectionError(f"{value!r} is not a (dx, dy) pair") from None
        return cls(x, y)

    def is_opposite(self, other) -> bool:
        ox, oy = other
        return self.x == -ox and self.y == -oy

    def __setattr__(self, name, value):
        raise AttributeError("Direction is immutable")

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if isinstance(other, Direction):
            return self.x == other.x and self.y == other.y
        if isinstance(other, tuple):
            return (self.x, self.y) == other
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


_UNIT_VECTORS = {(1, 0), (-1, 0), (0, 1), (0, -1)}

Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


# ─────────────────────────── GameState ───────────────────────────
@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at one instant.

    Attributes:
        food: the food cell
        snake: cells from head (index 0) to tail
        score: points collected since the last reset
        is_game_over: True once the snake ran into itself; frozen until reset
    """
    food: Position
    snake: tuple[Position, ...]
    score: int = 0
    is_game_over: bool = False

    def __post_init__(self):
        if not self.snake:
            raise ValueError("snake must contain at least one cell")
        # Accept lists from callers but keep the snapshot hashable.
        object.__setattr__(self, "snake", tuple(tuple(p) for p in self.snake))
        object.__setattr__(self, "food", tuple(self.food))

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def game_over(self) -> "GameState":
        """Same cells and score, marked as finished."""
        return replace(self, is_game_over=True)
