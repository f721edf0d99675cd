"""
ANSI terminal renderer.

The screen is cleared once; after that only cells whose age changed since
the previously drawn generation are repainted. The surrounding frame is
redrawn on the first render and every 100 generations.
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

import numpy as np

from driver import Frame, Status

RESET = "\033[0m"
CLEAR = "\033[2J"
CLEAR_EOL = "\033[K"

AGE_SHAPES = {1: ".", 2: "∘", 3: "∙"}
AGE_COLORS = {
    1: "\033[1;32m",  # green
    2: "\033[1;36m",  # cyan
    3: "\033[1;31m",  # red
    4: "\033[1;35m",  # magenta
}
OLD_COLOR = "\033[0;33m"
LIVE = "*"
DEAD = " "

FRAME_EVERY = 100
BOARD_TOP = 3  # terminal row of the first grid row (header, border above it)


def pos(r: int, c: int) -> str:
    """Cursor to 1-based terminal row r, column c."""
    return f"\033[{r};{c}H"


def cell_glyph(age: int, *, age_shape: bool = False, age_color: bool = False) -> str:
    if age == 0:
        return DEAD
    shape = AGE_SHAPES.get(age, LIVE) if age_shape else LIVE
    if age_color:
        return AGE_COLORS.get(age, OLD_COLOR) + shape + RESET
    return shape


def header(frame: Frame, status: Status) -> str:
    return (
        f"Conway's Life | board {frame.rows}x{frame.cols};"
        f" rate {status.rate}/sec; alive = {frame.alive:3d}; gen = {frame.generation}"
    )


class TerminalRenderer:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        age_shape: bool = False,
        age_color: bool = False,
        frame_every: int = FRAME_EVERY,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.age_shape = age_shape
        self.age_color = age_color
        self.frame_every = frame_every
        self._drawn: Optional[np.ndarray] = None

    def clear(self) -> None:
        self.stream.write(CLEAR)
        self.stream.flush()

    def _border(self, frame: Frame) -> list:
        edge = "+" + "-" * frame.cols + "+"
        out = [pos(2, 1) + edge]
        for r in range(frame.rows):
            out.append(pos(BOARD_TOP + r, 1) + "|")
            out.append(pos(BOARD_TOP + r, frame.cols + 2) + "|")
        out.append(pos(BOARD_TOP + frame.rows, 1) + edge)
        return out

    def render(self, frame: Frame, status: Status) -> None:
        out = [pos(1, 1) + header(frame, status) + CLEAR_EOL]

        first = self._drawn is None
        if first or frame.generation % self.frame_every == 1:
            out.extend(self._border(frame))

        drawn = np.zeros_like(frame.ages) if first else self._drawn
        for r, c in zip(*np.nonzero(frame.ages != drawn)):
            glyph = cell_glyph(int(frame.ages[r, c]), age_shape=self.age_shape, age_color=self.age_color)
            out.append(pos(BOARD_TOP + int(r), int(c) + 2) + glyph)

        out.append(pos(BOARD_TOP + frame.rows + 1, 1))
        self.stream.write("".join(out))
        self.stream.flush()
        self._drawn = frame.ages
