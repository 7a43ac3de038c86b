"""Puzzle grids and the built-in level set."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

from chainpuzzle.cardinal import Direction

MAX_SIZE = 10
"""Largest width or height a level may have."""

START = -1
"""State of a cell where a chain begins."""

EMPTY = 0
"""State of a cell that is not part of the puzzle."""

Entry = Union[int, Sequence[int]]


@dataclass
class Cell:
    """One square of the grid.

    ``state`` is -1 for a chain start, 0 for a hole and a positive height
    otherwise. ``place`` is the 1-based number of the chain covering the
    cell, or 0 when it is free. ``previous`` is the direction the chain
    moved in to reach the cell.
    """

    state: int
    place: int = 0
    previous: Direction | None = None


@dataclass
class Level:
    """A rectangular grid of cells."""

    grid: list[list[Cell]] = field(default_factory=list)
    width: int = 0
    height: int = 0

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Entry]], width: int, height: int) -> Level:
        """Build a level of ``height`` rows by ``width`` columns.

        Each entry is either a state or a ``(state, place)`` pair. Missing
        entries are empty cells; entries beyond the declared size are dropped.
        """
        for name, size in (("width", width), ("height", height)):
            if not 0 <= size <= MAX_SIZE:
                raise ValueError(f"{name} must be between 0 and {MAX_SIZE}, got {size}")
        grid = []
        for r in range(height):
            row = rows[r] if r < len(rows) else ()
            grid.append([_cell(row[c]) if c < len(row) else Cell(EMPTY) for c in range(width)])
        return cls(grid, width, height)

    def copy(self) -> Level:
        """Return an independent copy of this level."""
        return _copy.deepcopy(self)

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` for every cell, row by row."""
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                yield r, c, cell

    def is_unfinished(self) -> bool:
        """Whether some non-empty cell is still not covered by a chain."""
        return any(cell.place == 0 and cell.state != EMPTY for _, _, cell in self.cells())


def _cell(entry: Entry) -> Cell:
    if isinstance(entry, int):
        return Cell(entry)
    state, place = entry
    return Cell(state, place)


# Each level: (rows, width, height).
_LEVELS: tuple[tuple[tuple[tuple[Entry, ...], ...], int, int], ...] = (
    (((-1, 1, 1, 1),), 4, 1),
    (((0, 0, 1), (1, 1, 1), (-1, 0, 0)), 3, 3),
    (((1, 1, 1), (1, 0, 1), (1, 0, -1)), 3, 3),
    (
        (
            (1, 1, 1, 1, 1),
            (1, 0, 0, 0, 0),
            (1, 0, -1, 1, 1),
            (1, 0, 0, 0, 1),
            (1, 1, 1, 1, 1),
        ),
        5,
        5,
    ),
    (((1, 1, 1), (1, -1, 1), (1, 0, 0), (1, 1, 1)), 3, 4),
    (
        (
            (1, 1, 1, 1, 0),
            (1, 0, 0, 1, 1),
            (1, 0, -1, 1, 0),
            (1, 0, 0, 1, 0),
            (1, 1, 1, 1, 0),
        ),
        5,
        5,
    ),
    (((1, 1), (-1, 2)), 2, 2),
    (((1, 1), (1, -1), (1, 2)), 2, 3),
    (((2, 0), (1, 1), (1, 1), (-1, 0)), 2, 4),
    (((2, 1, 1), (2, -1, 1), (1, 1, 1)), 3, 3),
    # The eleventh level declares no dimensions, so it has no cells at all.
    (((1, 1, 3), (1, -1, 2), (1, 0, 1), (1, 1, 1)), 0, 0),
    (((0, 0, -1), (1, 1, 1), (1, 1, 1), (2, 2, 3)), 3, 4),
    (((3, 0, -1), (3, 2, 1), (3, 2, 2), (3, 2, 2)), 3, 4),
    (((0, 0, 0, 5), (0, 2, 2, 4), (0, 2, 2, 3), (-1, 1, 2, 2)), 4, 4),
    (
        (
            (1, 1, 1, 3, 4),
            (1, 0, 1, 3, 5),
            (1, -1, 1, 3, 3),
            (1, 0, 1, 1, 3),
            (1, 1, 1, 2, 2),
        ),
        5,
        5,
    ),
    (
        (
            (0, 7, 6, 3, 2, 0),
            (9, 8, 5, 4, 1, -1),
            (0, 4, 4, 4, 0, 0),
            (0, 4, 0, 4, 0, 0),
            (0, 4, 4, 4, 0, 0),
        ),
        6,
        5,
    ),
    (
        (
            (0, 0, 0, 0, -1, 0),
            (1, 1, 1, 1, 1, 0),
            (1, 1, 1, 1, 8, 9),
            (1, 1, 0, 0, 0, 0),
            (1, 1, 1, 1, 1, 0),
            (1, 1, 1, 1, 1, 0),
        ),
        6,
        6,
    ),
    (((0, 9, 8, 7), (4, 4, 4, 6), (4, -1, 4, 5), (4, 4, 0, 0)), 4, 4),
    (
        (
            (0, 2, 2, 2),
            (0, 2, 2, 2),
            (-1, 1, 2, 9),
            (0, 2, 2, 8),
            (0, 2, 2, 7),
        ),
        4,
        5,
    ),
    (
        (
            (4, 4, 4, 4, 4),
            (4, 2, 2, 2, 4),
            (4, 2, -1, 4, 4),
            (4, 2, 2, 4, 4),
            (4, 4, 4, 6, 8),
        ),
        5,
        5,
    ),
    (((1, 0, (-1, 2)), (1, 0, 1), ((-1, 1), 0, 1)), 3, 3),
    ((((-1, 1), 1, 1), (0, 0, 1), (1, 1, (-1, 2))), 3, 3),
    (((1, 1, 1), (1, 1, 0), ((-1, 1), 1, 0), ((-1, 2), 1, 1)), 3, 4),
    (
        (
            ((-1, 1), 1, 0, 1),
            (1, 1, 1, 1),
            (1, (-1, 2), 1, 0),
            (1, 1, 1, 1),
        ),
        4,
        4,
    ),
    (((1, 1, (-1, 2)), (1, 0, 1), ((-1, 1), 2, 1)), 3, 3),
    (((0, 1, 2, 2), (1, 1, 1, (-1, 2)), ((-1, 1), 0, 2, 2)), 4, 3),
    (
        (
            (0, (-1, 1), 1, 0),
            ((3, 1), 2, 1, 1),
            (3, 2, 1, 1),
            (2, 2, 1, (-1, 2)),
            (2, 3, 1, 1),
        ),
        4,
        5,
    ),
    ((((-1, 1), 6, 5), (2, 2, 1), (4, 3, (-1, 2))), 3, 3),
    (
        (
            (4, 2, 0, 1, (-1, 2)),
            ((-1, 1), 2, 2, 1, 1),
            (2, 2, 2, 2, 2),
            (4, 3, 0, 2, 2),
        ),
        5,
        4,
    ),
    (
        (
            (2, 2, 3, 3),
            (1, 2, 2, (-1, 2)),
            (1, (-1, 1), 2, 1),
            (1, 1, 3, 3),
        ),
        4,
        4,
    ),
)

LEVEL_COUNT = len(_LEVELS)
"""Number of built-in levels."""


def level(number: int) -> Level:
    """Return a fresh copy of built-in level ``number``, counting from 1."""
    if not 1 <= number <= LEVEL_COUNT:
        raise ValueError(f"level number must be between 1 and {LEVEL_COUNT}, got {number}")
    rows, width, height = _LEVELS[number - 1]
    return Level.from_rows(rows, width, height)