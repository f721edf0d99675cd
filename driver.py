"""
driver.py
---------
Seed a grid, then evolve it generation by generation, handing every
generation to a renderer exactly once and in order.

    SEEDING --run()--> RUNNING --turn limit--> STOPPED

With `turns == 0` the loop never stops on its own.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Tuple

import numpy as np

from grid import Grid
from placement import AUTO, place_shape
from seeds import seed_r_pentomino, seed_random
from shapes import Shape


class SimState(Enum):
    SEEDING = "seeding"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Frame:
    """What a renderer gets to see of one generation. `ages` is read-only."""
    rows: int
    cols: int
    ages: np.ndarray
    generation: int
    alive: int

    @classmethod
    def from_grid(cls, grid: Grid) -> "Frame":
        return cls(grid.rows, grid.cols, grid.snapshot(), grid.generation, grid.alive)


@dataclass(frozen=True)
class Status:
    rate: int
    turns: int


class Renderer(Protocol):
    def render(self, frame: Frame, status: Status) -> None:
        ...


class Simulation:
    def __init__(self, grid: Grid, *, turns: int = 0, rate: int = 2):
        if turns < 0:
            raise ValueError(f"turns must be >= 0, got {turns}")
        self.grid = grid
        self.turns = turns
        self.rate = rate
        self.state = SimState.SEEDING

    def _require(self, state: SimState, action: str) -> None:
        if self.state is not state:
            raise RuntimeError(f"cannot {action} while {self.state.value}")

    def seed_builtin(self) -> None:
        self._require(SimState.SEEDING, "seed")
        seed_r_pentomino(self.grid)

    def seed_random(self, count: int, seed: int = 42) -> None:
        self._require(SimState.SEEDING, "seed")
        seed_random(self.grid, count, seed)

    def seed_shape(self, shape: Shape, offset: Tuple[int, int] = AUTO) -> Tuple[int, int]:
        self._require(SimState.SEEDING, "seed")
        return place_shape(self.grid, shape, offset)

    def finished(self) -> bool:
        return self.turns > 0 and self.grid.generation >= self.turns

    def run(self, renderer: Renderer, pace: Optional[Callable[[], None]] = None) -> int:
        """Render/step until the turn limit; returns the last generation shown."""
        if self.state is SimState.STOPPED:
            raise RuntimeError("simulation already stopped")
        self.state = SimState.RUNNING
        status = Status(self.rate, self.turns)
        while True:
            renderer.render(Frame.from_grid(self.grid), status)
            if self.finished():
                break
            self.grid.step()
            if pace is not None:
                pace()
        self.state = SimState.STOPPED
        return self.grid.generation
