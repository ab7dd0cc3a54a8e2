# collision.py
from __future__ import annotations
import enum
from typing import Sequence

from .config import Cell
from .grid import in_bounds


class Collision(enum.Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"


def check(next_head: Cell, body: Sequence[Cell]) -> Collision:
    """
    Classify a candidate head against the body as it is *before* the move.

    The current tail counts as occupied even though it would be vacated on a
    non-eating move, so steering into your own tail ends the run.
    """
    if not in_bounds(next_head):
        return Collision.WALL
    if next_head in body:
        return Collision.SELF
    return Collision.NONE
