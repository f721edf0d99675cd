"""
grid.py
-------
Fixed-size board of per-cell ages with two generations held side by side.
`current` is what renderers see; `previous` is what `step` reads from.
"""
from __future__ import annotations

import numpy as np

from errors import InvalidDimension, OutOfBounds
from simulate import _neighbor_sum, step_ages


def _read_only(arr: np.ndarray) -> np.ndarray:
    """Detached copy; flipping its writeable flag cannot reach the grid."""
    copy = arr.copy()
    copy.flags.writeable = False
    return copy


class Grid:
    """Bounded, non-toroidal Life board. Rows and cols never change after construction."""

    def __init__(self, rows: int, cols: int, generation: int = 1):
        if not isinstance(rows, int) or not isinstance(cols, int) or rows <= 0 or cols <= 0:
            raise InvalidDimension(rows, cols)
        self._rows = rows
        self._cols = cols
        self._current = np.zeros((rows, cols), dtype=np.int64)
        self._previous = np.zeros((rows, cols), dtype=np.int64)
        self.alive = 0
        self.generation = generation

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def previous(self) -> np.ndarray:
        return _read_only(self._previous)

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols}, gen={self.generation}, alive={self.alive})"

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self._rows and 0 <= c < self._cols

    def set_alive(self, r: int, c: int, age: int = 1) -> None:
        """Mark (r, c) live with the given age. Off-grid cells raise OutOfBounds."""
        if age < 1:
            raise ValueError(f"age must be >= 1, got {age}")
        if not self.in_bounds(r, c):
            raise OutOfBounds(r, c, self._rows, self._cols)
        if self._current[r, c] == 0:
            self.alive += 1
        self._current[r, c] = age

    def neighbor_count(self, r: int, c: int) -> int:
        """Live Moore neighbors of (r, c) in the previous generation."""
        if not self.in_bounds(r, c):
            raise OutOfBounds(r, c, self._rows, self._cols)
        return _neighbor_sum(self._previous, r, c)

    def step(self) -> None:
        """Advance one generation (B3/S23, ages increment on survival)."""
        self._previous = self._current
        self._current = step_ages(self._previous)
        self.alive = int(np.count_nonzero(self._current))
        self.generation += 1

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the current generation."""
        return _read_only(self._current)

    def replace(self, ages: np.ndarray) -> None:
        """Install a whole new current buffer; used once while seeding."""
        ages = np.asarray(ages, dtype=np.int64)
        if ages.shape != (self._rows, self._cols):
            raise ValueError(
                f"buffer shape {ages.shape} does not match grid {self._rows}x{self._cols}"
            )
        if (ages < 0).any():
            raise ValueError("ages must be non-negative")
        self._current = ages.copy()
        self.alive = int(np.count_nonzero(self._current))
