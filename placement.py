"""
Put a parsed shape on the grid and move it into place.

Cells are first written around the grid's default centre (every cell is
bounds-checked before any is written), then the whole pattern is shifted
either by an explicit offset or so that its bounding box is centred.
Cells shifted off the grid are dropped.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from errors import OutOfBounds
from grid import Grid
from shapes import Shape

AUTO = (0, 0)


@dataclass(frozen=True)
class BoundingBox:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def center(self) -> Tuple[int, int]:
        return (self.min_x + self.max_x) // 2, (self.min_y + self.max_y) // 2


def grid_center(grid: Grid) -> Tuple[int, int]:
    """(x, y) the loader treats as the middle of the board."""
    return grid.cols // 2 - 1, grid.rows // 2 - 1


def bounding_box(grid: Grid) -> Optional[BoundingBox]:
    """Smallest box around all live cells, or None for an empty grid."""
    rows, cols = np.nonzero(grid.snapshot())
    if rows.size == 0:
        return None
    return BoundingBox(int(cols.min()), int(rows.min()), int(cols.max()), int(rows.max()))


def translate(grid: Grid, box: Optional[BoundingBox], offset: Tuple[int, int] = AUTO) -> Tuple[int, int]:
    """
    Shift every live cell by `offset` (dx, dy), or centre the box when offset
    is (0, 0). Ages are kept; cells that land off the grid are dropped.
    Returns the shift that was applied.
    """
    if box is None:
        return 0, 0

    dx, dy = offset
    if (dx, dy) == AUTO:
        center_x, center_y = grid_center(grid)
        box_x, box_y = box.center
        dx, dy = center_x - box_x, center_y - box_y

    ages = grid.snapshot()
    moved = np.zeros_like(ages)
    rows, cols = np.nonzero(ages)
    new_rows, new_cols = rows + dy, cols + dx
    keep = (new_rows >= 0) & (new_rows < grid.rows) & (new_cols >= 0) & (new_cols < grid.cols)
    moved[new_rows[keep], new_cols[keep]] = ages[rows[keep], cols[keep]]
    grid.replace(moved)
    return dx, dy


def place_shape(grid: Grid, shape: Shape, offset: Tuple[int, int] = AUTO) -> Tuple[int, int]:
    """
    Seed `grid` with `shape` and move it to its final position. Every cell
    is bounds-checked before the first one is written.
    """
    center_x, center_y = grid_center(grid)
    targets = sorted((center_y + y, center_x + x) for x, y in shape.cells)
    for r, c in targets:
        if not grid.in_bounds(r, c):
            raise OutOfBounds(r, c, grid.rows, grid.cols)
    for r, c in targets:
        grid.set_alive(r, c)
    return translate(grid, bounding_box(grid), offset)
