"""
Error taxonomy for the simulation core.

Every error is fatal where it is detected: the CLI turns it into a message on
stderr and a non-zero exit status. Nothing here is retried.
"""
from __future__ import annotations


class LifeError(Exception):
    """Base class for all simulation-core failures."""


class InvalidDimension(LifeError, ValueError):
    """Grid requested with a non-positive number of rows or columns."""

    def __init__(self, rows, cols):
        self.rows = rows
        self.cols = cols
        super().__init__(f"grid dimensions must be positive integers, got {rows}x{cols}")


class InvalidFormat(LifeError, ValueError):
    """Pattern text whose header is neither '#Life 1.05' nor '#Life 1.06'."""


class ParseError(LifeError, ValueError):
    """Malformed token inside a pattern file; `line` is 1-based."""

    def __init__(self, line: int, message: str):
        self.line = line
        super().__init__(f"error parsing shape in line {line}: {message}")


class OutOfBounds(LifeError, IndexError):
    """A seed or pattern cell that does not fit on the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        if not 0 <= row < rows:
            what = "rows"
        else:
            what = "cols"
        super().__init__(
            f"not enough {what} to render the shape: cell ({row}, {col}) "
            f"is outside the {rows}x{cols} board"
        )
