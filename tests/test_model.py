"""
Tests for the value types and the torus geometry helpers.
"""

import random

import pytest

from torus_snake.config import BOARD_SIZE, GameSettings
from torus_snake.geometry import random_cell, step, wrap
from torus_snake.model import ALL_DIRS, Direction, GameState, InvalidDirectionError


class TestDirection:
    """Tests for the Direction value object."""

    def test_named_directions(self):
        assert Direction.RIGHT == (1, 0)
        assert Direction.LEFT == (-1, 0)
        assert Direction.UP == (0, -1)
        assert Direction.DOWN == (0, 1)

    def test_tuple_equality_is_symmetric(self):
        assert (1, 0) == Direction.RIGHT
        assert Direction.RIGHT != (0, 1)

    def test_unpacks_like_a_pair(self):
        dx, dy = Direction.DOWN
        assert (dx, dy) == (0, 1)

    def test_hashable_and_equal_to_tuple_hash(self):
        assert {Direction.UP: "up"}[Direction(0, -1)] == "up"
        assert hash(Direction.LEFT) == hash((-1, 0))

    @pytest.mark.parametrize("vector", [
        (0, 0), (1, 1), (2, 0), (-1, -1), (0, 3),
        (0.0, 1.0), (1.0, 0), (True, 0), (0, False),
    ])
    def test_rejects_non_unit_vectors(self, vector):
        with pytest.raises(InvalidDirectionError):
            Direction(*vector)

    @pytest.mark.parametrize("value", [None, 5, "up", (1,), (1, 0, 0)])
    def test_of_rejects_non_pairs(self, value):
        with pytest.raises(InvalidDirectionError):
            Direction.of(value)

    def test_invalid_direction_error_is_value_error(self):
        assert issubclass(InvalidDirectionError, ValueError)

    def test_of_returns_same_instance_for_direction(self):
        assert Direction.of(Direction.UP) is Direction.UP
        assert Direction.of([0, 1]) == Direction.DOWN

    def test_is_opposite(self):
        assert Direction.RIGHT.is_opposite(Direction.LEFT)
        assert Direction.UP.is_opposite((0, 1))
        assert not Direction.RIGHT.is_opposite(Direction.UP)
        assert not Direction.RIGHT.is_opposite(Direction.RIGHT)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Direction.RIGHT.x = 0


class TestGameState:
    """Tests for the GameState snapshot."""

    def test_head_and_length(self):
        state = GameState(food=(5, 5), snake=((3, 3), (2, 3)))
        assert state.head == (3, 3)
        assert state.length == 2
        assert state.score == 0
        assert state.is_game_over is False

    def test_lists_are_normalised_to_tuples(self):
        state = GameState(food=[5, 5], snake=[[3, 3], [2, 3]])
        assert state.snake == ((3, 3), (2, 3))
        assert state.food == (5, 5)
        assert state == GameState(food=(5, 5), snake=((3, 3), (2, 3)))

    def test_empty_snake_rejected(self):
        with pytest.raises(ValueError):
            GameState(food=(5, 5), snake=())

    def test_frozen(self):
        state = GameState(food=(5, 5), snake=((7, 7),))
        with pytest.raises(AttributeError):
            state.score = 10

    def test_game_over_keeps_everything_else(self):
        state = GameState(food=(1, 2), snake=((3, 3), (4, 3)), score=200)
        over = state.game_over()
        assert over.is_game_over is True
        assert (over.food, over.snake, over.score) == (state.food, state.snake, state.score)
        assert state.is_game_over is False


class TestGeometry:
    """Tests for wraparound arithmetic."""

    def test_wrap_is_non_negative(self):
        assert wrap(-1, 16) == 15
        assert wrap(16, 16) == 0
        assert wrap(-17, 16) == 15
        assert wrap(5, 16) == 5

    def test_step_off_right_edge(self):
        assert step((15, 7), (1, 0), 16) == (0, 7)

    def test_step_off_every_edge(self):
        assert step((0, 7), Direction.LEFT, 16) == (15, 7)
        assert step((4, 0), Direction.UP, 16) == (4, 15)
        assert step((4, 15), Direction.DOWN, 16) == (4, 0)

    def test_step_never_leaves_the_board(self):
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                for d in ALL_DIRS:
                    nx, ny = step((x, y), d, BOARD_SIZE)
                    assert 0 <= nx < BOARD_SIZE
                    assert 0 <= ny < BOARD_SIZE

    def test_random_cell_in_bounds(self):
        rng = random.Random(0)
        for _ in range(200):
            x, y = random_cell(rng, 4)
            assert 0 <= x < 4 and 0 <= y < 4

    def test_random_cell_respects_exclude(self):
        rng = random.Random(0)
        exclude = {(x, y) for x in range(4) for y in range(4)} - {(2, 3)}
        assert random_cell(rng, 4, exclude) == (2, 3)

    def test_random_cell_full_board_raises(self):
        exclude = [(x, y) for x in range(2) for y in range(2)]
        with pytest.raises(ValueError):
            random_cell(random.Random(0), 2, exclude)


class TestGameSettings:
    """Tests for settings validation."""

    def test_defaults(self):
        s = GameSettings()
        assert s.board_size == 16
        assert s.tick_interval == pytest.approx(0.150)
        assert s.food_reward == 100
        assert s.initial_target_length == 4
        assert s.initial_snake == ((7, 7),)
        assert s.initial_food == (5, 5)
        assert s.initial_direction == (1, 0)
        assert s.food_clear_of_snake is False

    @pytest.mark.parametrize("overrides", [
        {"board_size": 0},
        {"tick_interval": 0},
        {"food_reward": -1},
        {"initial_target_length": 0},
        {"initial_snake": ()},
        {"initial_snake": ((1, 1), (1, 1))},
        {"initial_snake": ((16, 0),)},
        {"initial_food": (0, -1)},
    ])
    def test_invalid_settings_rejected(self, overrides):
        with pytest.raises(ValueError):
            GameSettings(**overrides)
