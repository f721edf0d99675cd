"""
shapes.py
---------
Decode Life pattern text into a set of live cells.

Two historical dialects are understood, chosen by the first non-empty line:

* ``#Life 1.05`` - picture rows, ``*`` is a live cell, ``#P x y`` shifts the
  origin for the rows that follow it.
* ``#Life 1.06`` - one ``x y`` coordinate pair per line.

Parsing never touches a grid; `placement.place_shape` does that.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from errors import InvalidFormat, ParseError

IS_105 = re.compile(r"^\s*#\s*Life\s+1\.05")
IS_106 = re.compile(r"^\s*#\s*Life\s+1\.06")

_INT = re.compile(r"^[+-]?\d+$")

LIVE_GLYPH = "*"


@dataclass(frozen=True)
class Shape:
    """
    Live cells as (x, y) = (column, row) pairs relative to the pattern origin.
    For 1.05 the `#P` shifts are already folded into `cells`; `offset` is their total.
    """
    cells: FrozenSet[Tuple[int, int]]
    offset: Tuple[int, int] = (0, 0)
    dialect: str = "1.06"
    description: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.cells)


def _to_int(token: str, line_no: int) -> int:
    if not _INT.match(token):
        raise ParseError(line_no, f"invalid integer {token!r}")
    return int(token)


def _comment_text(stripped: str) -> str:
    return stripped[2:].strip()


def _parse_105(lines: List[Tuple[int, str]]) -> Shape:
    cells = set()
    description: List[str] = []
    off_x = off_y = 0
    row = 0  # counts content lines only
    for line_no, line in lines:
        stripped = line.strip()
        if stripped.startswith("#"):
            if stripped[1:2] == "P":
                fields = stripped[2:].split()
                if len(fields) < 2:
                    raise ParseError(line_no, "#P needs two integers")
                off_x += _to_int(fields[0], line_no)
                off_y += _to_int(fields[1], line_no)
            elif stripped[1:2] == "D":
                description.append(_comment_text(stripped))
            continue

        for col, ch in enumerate(line):
            if ch == LIVE_GLYPH:
                cells.add((off_x + col, off_y + row))
        row += 1
    return Shape(frozenset(cells), (off_x, off_y), "1.05", tuple(description))


def _parse_106(lines: List[Tuple[int, str]]) -> Shape:
    cells = set()
    description: List[str] = []
    for line_no, line in lines:
        stripped = line.strip()
        if stripped.startswith("#"):
            if stripped[1:2] == "D":
                description.append(_comment_text(stripped))
            continue
        fields = stripped.split()
        if len(fields) < 2:
            continue
        cells.add((_to_int(fields[0], line_no), _to_int(fields[1], line_no)))
    return Shape(frozenset(cells), (0, 0), "1.06", tuple(description))


def parse_shape(text: str) -> Shape:
    """
    Parse pattern text. Raises InvalidFormat for an unknown header and
    ParseError (with a 1-based line number) for a malformed integer.
    """
    numbered = list(enumerate(text.splitlines(), 1))
    start = next((i for i, (_, line) in enumerate(numbered) if line.strip()), None)
    if start is None:
        raise InvalidFormat("pattern text is empty")

    header = numbered[start][1]
    body = numbered[start + 1:]
    if IS_105.match(header):
        return _parse_105(body)
    if IS_106.match(header):
        return _parse_106(body)
    raise InvalidFormat(f"unrecognised pattern header: {header.strip()!r}")
