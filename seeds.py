"""Built-in starting patterns for when no pattern file is given."""
from __future__ import annotations
from typing import List, Tuple

import numpy as np

from errors import OutOfBounds
from grid import Grid

# (row, col) offsets from the grid centre
R_PENTOMINO: List[Tuple[int, int]] = [
    (0, 0),
    (1, 0),
    (2, 0),
    (0, 1),
    (1, -1),
]


def seed_r_pentomino(grid: Grid) -> None:
    """Place the 5-cell R-pentomino at a fixed offset from the centre; not re-centred."""
    r0, c0 = grid.rows // 2, grid.cols // 2
    targets = [(r0 + dr, c0 + dc) for dr, dc in R_PENTOMINO]
    for r, c in targets:
        if not grid.in_bounds(r, c):
            raise OutOfBounds(r, c, grid.rows, grid.cols)
    for r, c in targets:
        grid.set_alive(r, c)


def seed_random(grid: Grid, count: int, seed: int = 42) -> None:
    """
    Drop `count` cells at random positions. The RNG is seeded so runs repeat;
    positions may collide, so fewer than `count` cells can end up alive.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = np.random.default_rng(seed)
    for _ in range(count):
        r = int(rng.integers(0, grid.rows))
        c = int(rng.integers(0, grid.cols))
        grid.set_alive(r, c)
