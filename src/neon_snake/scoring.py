# scoring.py
from __future__ import annotations
from dataclasses import dataclass

from .config import FOOD_SCORE, INITIAL_SPEED, SPEED_FLOOR, SPEED_STEP


@dataclass
class ScoreTracker:
    score: int = 0
    high_score: int = 0

    def award(self) -> bool:
        """Count one food. Returns True if the high score moved."""
        self.score += FOOD_SCORE
        if self.score > self.high_score:
            self.high_score = self.score
            return True
        return False

    def reset(self) -> None:
        # high score is session-wide and survives restarts
        self.score = 0


@dataclass
class SpeedController:
    interval_ms: int = INITIAL_SPEED

    def accelerate(self) -> bool:
        """Shorten the tick interval by one step, clamped at the floor."""
        previous = self.interval_ms
        self.interval_ms = max(SPEED_FLOOR, self.interval_ms - SPEED_STEP)
        return self.interval_ms != previous

    def reset(self) -> None:
        self.interval_ms = INITIAL_SPEED

    @property
    def tiles_per_second(self) -> float:
        return 1000 / self.interval_ms
