# food.py
from __future__ import annotations
import random
from typing import Iterable, Optional

from .config import FALLBACK_FOOD, Cell
from .grid import free_cells


class FoodSpawner:
    """Picks a free cell for the next food item."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def spawn(self, occupied: Iterable[Cell]) -> Cell:
        spaces = free_cells(occupied)
        if not spaces:
            # Board is full: nothing left to eat, the next move ends the run.
            return FALLBACK_FOOD
        return spaces[self.rng.randrange(len(spaces))]
