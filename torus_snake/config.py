"""
config.py — Shared constants for the entire application.
No logic beyond settings validation, no imports from internal modules.
"""

from dataclasses import dataclass

# ── Gameplay ──────────────────────────────────────────────────────
BOARD_SIZE            = 16
TICK_INTERVAL         = 0.150    # seconds between ticks
FOOD_REWARD           = 100      # points per food eaten
INITIAL_TARGET_LENGTH = 4
INITIAL_SNAKE         = ((7, 7),)
INITIAL_FOOD          = (5, 5)
INITIAL_DIRECTION     = (1, 0)   # rightward

# ── Window & Grid ─────────────────────────────────────────────────
CELL            = 28
PANEL_H         = 60
PAD_H           = 150
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
GAME_W = GAME_H = BOARD_SIZE * CELL
WIDTH           = GAME_W + 2 * OFFSET_X
HEIGHT          = OFFSET_Y + GAME_H + 10 + PAD_H
FPS             = 60

# ── Direction pad ─────────────────────────────────────────────────
BUTTON          = 42
BUTTON_GAP      = 4

# ── Colors ────────────────────────────────────────────────────────
BG          = (10,  10,  15)
GRID_COL    = (15,  20,  32)
SNAKE_COL   = (0,   255, 136)
SNAKE_DIM   = (0,   140, 80)
FOOD_COL    = (255, 228, 77)
OVER_COL    = (255, 51,  102)
UI_COL      = (120, 120, 170)
BLACK       = (0,   0,   0)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)


@dataclass(frozen=True)
class GameSettings:
    """Engine constants as named parameters, so tests can vary them."""
    board_size: int = BOARD_SIZE
    tick_interval: float = TICK_INTERVAL
    food_reward: int = FOOD_REWARD
    initial_target_length: int = INITIAL_TARGET_LENGTH
    initial_snake: tuple = INITIAL_SNAKE
    initial_food: tuple = INITIAL_FOOD
    initial_direction: tuple = INITIAL_DIRECTION
    # Off by default: respawned food may land on the snake or stay put.
    food_clear_of_snake: bool = False

    def __post_init__(self):
        if self.board_size <= 0:
            raise ValueError(f"board_size must be positive, got {self.board_size}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.food_reward < 0:
            raise ValueError(f"food_reward must be non-negative, got {self.food_reward}")
        if self.initial_target_length < 1:
            raise ValueError(
                f"initial_target_length must be at least 1, got {self.initial_target_length}"
            )
        if not self.initial_snake:
            raise ValueError("initial_snake must contain at least one cell")
        if len(set(self.initial_snake)) != len(self.initial_snake):
            raise ValueError(f"initial_snake has duplicate cells: {self.initial_snake}")
        for x, y in (*self.initial_snake, self.initial_food):
            if not (0 <= x < self.board_size and 0 <= y < self.board_size):
                raise ValueError(
                    f"cell ({x}, {y}) lies outside a {self.board_size}x{self.board_size} board"
                )
