import random

import pytest

from neon_snake.collision import Collision
from neon_snake.config import GRID_SIZE, INITIAL_SPEED, LEFT, RIGHT, UP
from neon_snake.food import FoodSpawner
from neon_snake.game import GameState, new_game_state, step_game
from neon_snake.scoring import ScoreTracker, SpeedController
from neon_snake.snake import SnakeBody, initial_cells


def make_state(cells, direction=RIGHT, food=(0, 24), high_score=0):
    return GameState(
        snake=SnakeBody(cells),
        food=food,
        direction=direction,
        scores=ScoreTracker(high_score=high_score),
    )


@pytest.fixture
def spawner():
    return FoodSpawner(random.Random(11))


class TestNewGame:
    def test_initial_layout(self, spawner):
        state = new_game_state(spawner)
        assert state.snake.cells == [(13, 12), (12, 12), (11, 12)]
        assert state.snake.cells == initial_cells()
        assert state.direction == RIGHT
        assert state.scores.score == 0
        assert state.speed.interval_ms == INITIAL_SPEED
        assert state.food not in state.snake

    def test_high_score_carried_in(self, spawner):
        assert new_game_state(spawner, high_score=90).scores.high_score == 90

    def test_empty_snake_rejected(self):
        with pytest.raises(ValueError):
            SnakeBody([])


class TestMovement:
    def test_plain_move_drops_tail(self, spawner):
        state = make_state([(5, 5), (4, 5), (3, 5)])
        result = step_game(state, spawner)
        assert result.alive and not result.ate
        assert state.snake.cells == [(6, 5), (5, 5), (4, 5)]

    def test_single_cell_snake_moves(self, spawner):
        state = make_state([(5, 5)], direction=UP)
        step_game(state, spawner)
        assert state.snake.cells == [(5, 4)]


class TestWalls:
    @pytest.mark.parametrize(
        "cells, direction",
        [
            ([(0, 5), (1, 5)], LEFT),
            ([(5, 0), (5, 1)], UP),
            ([(GRID_SIZE - 1, 5), (GRID_SIZE - 2, 5)], RIGHT),
            ([(5, GRID_SIZE - 1), (5, GRID_SIZE - 2)], (0, 1)),
        ],
    )
    def test_wall_leaves_body_unchanged(self, spawner, cells, direction):
        state = make_state(cells, direction=direction)
        result = step_game(state, spawner)
        assert result.collision is Collision.WALL
        assert state.snake.cells == cells


class TestSelfCollision:
    def test_running_into_body(self, spawner):
        cells = [(5, 5), (5, 4), (6, 4), (7, 4), (7, 5), (6, 5), (6, 6), (6, 7)]
        state = make_state(cells, direction=RIGHT)
        result = step_game(state, spawner)
        assert result.collision is Collision.SELF
        assert state.snake.cells == cells

    def test_tail_cell_is_fatal(self, spawner):
        # head at (5,5), tail at (6,5): moving right lands on the tail
        cells = [(5, 5), (5, 6), (6, 6), (6, 5)]
        state = make_state(cells, direction=RIGHT)
        result = step_game(state, spawner)
        assert result.collision is Collision.SELF
        assert state.snake.cells == cells


class TestEating:
    def test_food_grows_scores_and_speeds_up(self, spawner):
        state = make_state(initial_cells(), food=(14, 12))
        result = step_game(state, spawner)
        assert result.ate and result.alive
        assert result.high_score_changed and result.speed_changed
        assert state.snake.cells == [(14, 12), (13, 12), (12, 12), (11, 12)]
        assert state.scores.score == 10
        assert state.scores.high_score == 10
        assert state.speed.interval_ms == INITIAL_SPEED - 4
        assert state.food not in state.snake

    def test_high_score_not_lowered(self, spawner):
        state = make_state(initial_cells(), food=(14, 12), high_score=500)
        result = step_game(state, spawner)
        assert not result.high_score_changed
        assert state.scores.high_score == 500

    def test_speed_clamped_at_floor(self, spawner):
        state = make_state(initial_cells(), food=(14, 12))
        state.speed = SpeedController(interval_ms=62)
        step_game(state, spawner)
        assert state.speed.interval_ms == 60

        state.food = (15, 12)
        result = step_game(state, spawner)
        assert state.speed.interval_ms == 60
        assert not result.speed_changed

    def test_filling_the_board_falls_back_to_origin(self, spawner):
        # serpentine path through every cell; the snake covers all but (0, 0)
        path = []
        for y in range(GRID_SIZE):
            xs = range(GRID_SIZE) if y % 2 == 0 else reversed(range(GRID_SIZE))
            path.extend((x, y) for x in xs)
        state = make_state(path[1:], direction=LEFT, food=path[0])
        result = step_game(state, spawner)
        assert result.ate
        assert len(state.snake) == GRID_SIZE * GRID_SIZE
        assert state.food == (0, 0)


def test_direction_version_counts_changes(spawner):
    state = new_game_state(spawner)
    state.apply_direction(RIGHT)
    assert state.direction_version == 0
    state.apply_direction(UP)
    state.apply_direction(LEFT)
    assert state.direction == LEFT
    assert state.direction_version == 2


def test_tiles_per_second():
    assert SpeedController(interval_ms=125).tiles_per_second == 8.0
