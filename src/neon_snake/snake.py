# snake.py
from __future__ import annotations
from typing import Iterable, List, Optional

from .config import GRID_SIZE, Cell, Direction


def initial_cells() -> List[Cell]:
    """Three cells centered on the grid, head rightmost."""
    center = GRID_SIZE // 2
    return [
        (center + 1, center),
        (center, center),
        (center - 1, center),
    ]


class SnakeBody:
    """Ordered body, head at index 0, tail at the end."""

    def __init__(self, cells: Optional[Iterable[Cell]] = None):
        self.cells: List[Cell] = list(cells) if cells is not None else initial_cells()
        if not self.cells:
            raise ValueError("snake needs at least one cell")

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __contains__(self, cell) -> bool:
        return cell in self.cells

    @property
    def head(self) -> Cell:
        return self.cells[0]

    @property
    def tail(self) -> Cell:
        return self.cells[-1]

    def next_head(self, direction: Direction) -> Cell:
        hx, hy = self.head
        dx, dy = direction
        return (hx + dx, hy + dy)

    def advance(self, new_head: Cell, grow: bool) -> Optional[Cell]:
        """Prepend `new_head`; drop and return the tail unless growing."""
        self.cells.insert(0, new_head)
        if grow:
            return None
        return self.cells.pop()
