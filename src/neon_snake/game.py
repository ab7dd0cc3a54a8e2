# game.py
from __future__ import annotations
from dataclasses import dataclass, field
import logging

from . import collision
from .collision import Collision
from .config import RIGHT, Cell, Direction
from .food import FoodSpawner
from .scoring import ScoreTracker, SpeedController
from .snake import SnakeBody

logger = logging.getLogger(__name__)


# ---------- State ----------
@dataclass
class GameState:
    snake: SnakeBody
    food: Cell
    direction: Direction = RIGHT
    direction_version: int = 0     # bumped on every applied change
    scores: ScoreTracker = field(default_factory=ScoreTracker)
    speed: SpeedController = field(default_factory=SpeedController)

    def apply_direction(self, direction: Direction) -> None:
        if direction != self.direction:
            self.direction = direction
            self.direction_version += 1


@dataclass(frozen=True)
class TickResult:
    collision: Collision = Collision.NONE
    ate: bool = False
    high_score_changed: bool = False
    speed_changed: bool = False

    @property
    def alive(self) -> bool:
        return self.collision is Collision.NONE


def new_game_state(spawner: FoodSpawner, high_score: int = 0) -> GameState:
    snake = SnakeBody()
    return GameState(
        snake=snake,
        food=spawner.spawn(snake.cells),
        scores=ScoreTracker(high_score=high_score),
    )


# ---------- Update ----------
def step_game(state: GameState, spawner: FoodSpawner) -> TickResult:
    """
    Advance the snake one cell in `state.direction`.
    On a collision the body is left exactly as it was and the result says why.
    """
    next_head = state.snake.next_head(state.direction)

    hit = collision.check(next_head, state.snake.cells)
    if hit is not Collision.NONE:
        logger.info("collision (%s) at %s with score %d", hit.value, next_head, state.scores.score)
        return TickResult(collision=hit)

    if next_head != state.food:
        state.snake.advance(next_head, grow=False)
        return TickResult()

    # Eat & grow
    state.snake.advance(next_head, grow=True)
    state.food = spawner.spawn(state.snake.cells)
    high_score_changed = state.scores.award()
    speed_changed = state.speed.accelerate()
    return TickResult(
        ate=True,
        high_score_changed=high_score_changed,
        speed_changed=speed_changed,
    )
