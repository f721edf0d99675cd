from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import FrozenSet

import numpy as np

MAX_NEIGHBORS = 8 # Moore neighborhood


@dataclass(frozen=True)
class LifeRule:
    """
    Outer-totalistic binary rule: the neighbor sums that make a dead cell
    come alive (`born`) and keep a live cell alive (`survive`).
    """
    born: FrozenSet[int]
    survive: FrozenSet[int]

    def __post_init__(self) -> None:
        for n in self.born | self.survive:
            if not 0 <= n <= MAX_NEIGHBORS:
                raise ValueError(f"neighbor sum {n} outside 0..{MAX_NEIGHBORS}")

    @cached_property
    def table(self) -> np.ndarray:
        """Read-only lookup indexed as table[self_state, neighbor_sum] -> 0/1."""
        table = np.zeros((2, MAX_NEIGHBORS + 1), dtype=np.int8)
        for n in self.born:
            table[0, n] = 1
        for n in self.survive:
            table[1, n] = 1
        table.flags.writeable = False
        return table


CONWAY = LifeRule(born=frozenset({3}), survive=frozenset({2, 3}))
