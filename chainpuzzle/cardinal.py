"""Compass directions a chain can grow in."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A compass direction, bound to its command key and its grid offset."""

    NORTH = ("n", -1, 0)
    SOUTH = ("s", 1, 0)
    WEST = ("w", 0, -1)
    EAST = ("e", 0, 1)

    @property
    def key(self) -> str:
        """The command key that selects this direction."""
        return self.value[0]

    @property
    def row_delta(self) -> int:
        return self.value[1]

    @property
    def col_delta(self) -> int:
        return self.value[2]

    @classmethod
    def from_key(cls, key: str) -> Direction:
        """Return the direction whose command key is ``key``.

        Raises ValueError when no direction uses that key.
        """
        for direction in cls:
            if direction.key == key:
                return direction
        raise ValueError(f"no direction for key {key!r}")

    def step(self, row: int, col: int) -> tuple[int, int]:
        """Return the position one step from (row, col) in this direction."""
        return row + self.row_delta, col + self.col_delta