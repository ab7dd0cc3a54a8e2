# input_queue.py
from __future__ import annotations
from typing import Optional

from .config import Direction


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] + b[0] == 0 and a[1] + b[1] == 0


class InputQueue:
    """
    Holds at most one pending direction between ticks.

    Every accepted proposal overwrites the previous one, so however many keys
    arrive between two ticks only the last valid one takes effect.
    """

    def __init__(self) -> None:
        self._pending: Optional[Direction] = None

    @property
    def pending(self) -> Optional[Direction]:
        return self._pending

    def propose(self, direction: Direction, current: Direction) -> bool:
        """Queue `direction` unless it reverses `current`. Returns True if queued."""
        if is_opposite(direction, current):
            return False
        self._pending = direction
        return True

    def consume(self, current: Direction) -> Direction:
        """Pop the pending direction, or fall back to `current`."""
        direction = self._pending
        self._pending = None
        return current if direction is None else direction

    def clear(self) -> None:
        self._pending = None
