from __future__ import annotations

import numpy as np

from rules import CONWAY, LifeRule


def _neighbor_sum(ages: np.ndarray, r: int, c: int) -> int:
    """
    Return number of live neighbors (Moore, eight cells) for cell (r,c).
    A cell is live when its age is > 0. Out-of-bounds neighbors are treated
    as dead; there is no wrap-around.
    """
    h, w = ages.shape
    total = 0
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            rr = r + dr
            cc = c + dc
            if 0 <= rr < h and 0 <= cc < w and ages[rr, cc] > 0:
                total += 1
    return total


def neighbor_counts(ages: np.ndarray) -> np.ndarray:
    """
    Live-neighbor count for every cell at once. The grid is padded with a
    ring of dead cells, so edges and corners see fewer candidates.
    """
    h, w = ages.shape
    live = np.pad((ages > 0).astype(np.int8), 1)
    counts = np.zeros((h, w), dtype=np.int8)
    for dr in (0, 1, 2):
        for dc in (0, 1, 2):
            if dr == 1 and dc == 1:
                continue
            counts += live[dr:dr + h, dc:dc + w]
    return counts


def step_ages(previous: np.ndarray, rule: LifeRule = CONWAY) -> np.ndarray:
    """
    One synchronous update of an age grid.
    Survivors age by one, births start at age 1, everything else is 0.
    """
    alive = previous > 0
    outcome = rule.table[alive.astype(np.intp), neighbor_counts(previous)]
    return np.where(outcome == 1, np.where(alive, previous + 1, 1), 0).astype(previous.dtype)

