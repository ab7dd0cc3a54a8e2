# grid.py
from __future__ import annotations
from typing import Iterable, List

import numpy as np  # type: ignore

from .config import GRID_SIZE, Cell


def in_bounds(cell: Cell) -> bool:
    """Check if a cell is inside the grid."""
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def occupancy(occupied: Iterable[Cell]) -> np.ndarray:
    """
    Boolean mask indexed [y, x]; True where a cell is taken.
    Cells outside the grid are ignored.
    """
    mask = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
    for cell in occupied:
        if in_bounds(cell):
            x, y = cell
            mask[y, x] = True
    return mask


def free_cells(occupied: Iterable[Cell]) -> List[Cell]:
    """
    Every grid cell not in `occupied`, scanned row-major (y outer, x inner).
    The order is stable so a seeded random pick is reproducible.
    """
    ys, xs = np.nonzero(~occupancy(occupied))
    return [(int(x), int(y)) for y, x in zip(ys.tolist(), xs.tolist())]
