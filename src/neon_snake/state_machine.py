# state_machine.py
from __future__ import annotations
import enum
import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from .config import DIRECTIONS, Cell, Direction
from .food import FoodSpawner
from .game import GameState, TickResult, new_game_state, step_game
from .input_queue import InputQueue
from .scheduler import Scheduler
from .storage import load_high_score, save_high_score

logger = logging.getLogger(__name__)


class RunState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Snapshot(NamedTuple):
    """What a renderer needs after every snake/food change."""
    snake_cells: Tuple[Cell, ...]
    food_cell: Cell


class GameStateMachine:
    """
    Owns the simulation state, the input buffer and the tick scheduler.

    Ticks are the only place the snake, food, score and speed change. Input
    only writes to the InputQueue (plus run-state changes), and every change
    of speed or run state re-arms or cancels the single scheduler timer.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        spawner: Optional[FoodSpawner] = None,
        store=None,
    ):
        self.scheduler = scheduler
        self.spawner = spawner if spawner is not None else FoodSpawner()
        self.store = store
        self.input_queue = InputQueue()
        self.run_state = RunState.IDLE
        self._listeners: List[Callable[[Snapshot], None]] = []

        high_score = load_high_score(store) if store is not None else 0
        self.state: GameState = new_game_state(self.spawner, high_score=high_score)
        self.scheduler.bind(self.tick)

    # ---------- Observers ----------
    def subscribe(self, listener: Callable[[Snapshot], None]) -> None:
        """Register a renderer; it is called immediately with the current board."""
        self._listeners.append(listener)
        listener(self.snapshot())

    def snapshot(self) -> Snapshot:
        return Snapshot(tuple(self.state.snake.cells), self.state.food)

    def _publish(self) -> None:
        snap = self.snapshot()
        for listener in self._listeners:
            listener(snap)

    # ---------- Convenience views ----------
    @property
    def score(self) -> int:
        return self.state.scores.score

    @property
    def high_score(self) -> int:
        return self.state.scores.high_score

    @property
    def speed(self) -> int:
        return self.state.speed.interval_ms

    @property
    def show_start(self) -> bool:
        return self.run_state in (RunState.IDLE, RunState.PAUSED) and self.score == 0

    @property
    def show_resume(self) -> bool:
        return self.run_state is RunState.PAUSED and self.score > 0

    @property
    def can_restart(self) -> bool:
        return not self.show_start

    # ---------- Transitions ----------
    def _set_run_state(self, run_state: RunState) -> None:
        if run_state is not self.run_state:
            logger.debug("run state %s -> %s", self.run_state.value, run_state.value)
            self.run_state = run_state
        if run_state is RunState.RUNNING:
            self.scheduler.arm(self.speed)
        else:
            self.scheduler.cancel()

    def start(self) -> None:
        if self.run_state is RunState.GAME_OVER:
            self.restart()
        elif self.run_state is not RunState.RUNNING:
            self._set_run_state(RunState.RUNNING)

    def pause(self) -> None:
        if self.run_state is RunState.RUNNING:
            self._set_run_state(RunState.PAUSED)

    def resume(self) -> None:
        if self.run_state is RunState.PAUSED:
            self._set_run_state(RunState.RUNNING)

    def toggle(self) -> None:
        """Space bar: restart after game over, otherwise flip pause/run."""
        if self.run_state is RunState.GAME_OVER:
            self.restart()
        elif self.run_state is RunState.RUNNING:
            self.pause()
        else:
            self._set_run_state(RunState.RUNNING)

    def restart(self) -> None:
        """Reinitialize snake, direction, food, score, speed and input; then run."""
        self.scheduler.cancel()
        self.input_queue.clear()
        self.state = new_game_state(self.spawner, high_score=self.high_score)
        self._set_run_state(RunState.RUNNING)
        self._publish()

    def steer(self, direction: Direction) -> bool:
        """
        Buffer a direction change for the next tick. The first accepted move
        also starts (or resumes) the run. Returns True if it was queued.
        """
        if direction not in DIRECTIONS:
            raise ValueError(f"not a cardinal direction: {direction!r}")
        if self.run_state is RunState.GAME_OVER:
            return False
        if not self.input_queue.propose(direction, self.state.direction):
            return False
        if self.run_state is not RunState.RUNNING:
            self._set_run_state(RunState.RUNNING)
        return True

    # ---------- Tick ----------
    def tick(self) -> Optional[TickResult]:
        if self.run_state is not RunState.RUNNING:
            return None

        self.state.apply_direction(self.input_queue.consume(self.state.direction))
        result = step_game(self.state, self.spawner)

        if not result.alive:
            logger.info("game over, score %d", self.score)
            self._set_run_state(RunState.GAME_OVER)
            return result

        if result.high_score_changed:
            logger.info("new high score %d", self.high_score)
            if self.store is not None:
                save_high_score(self.store, self.high_score)
        if result.speed_changed:
            self.scheduler.arm(self.speed)
        self._publish()
        return result
