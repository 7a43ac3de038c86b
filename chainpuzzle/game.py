"""Rules of the chain puzzle: growing, undoing, erasing and switching chains."""

from __future__ import annotations

from enum import Enum

from chainpuzzle.cardinal import Direction
from chainpuzzle.level import EMPTY, START, Cell, Level


class Command(Enum):
    """Single-key commands other than the four directions."""

    RESET = "x"
    UNDO = "b"
    ERASE = "r"
    OTHER_CHAIN = "c"


def can_enter(current: Cell, target: Cell) -> bool:
    """Whether a chain whose head is on ``current`` may grow onto ``target``.

    The target must be free, part of the puzzle and no lower than the head.
    """
    return target.place == 0 and target.state != EMPTY and current.state <= target.state


def find_starts(level: Level) -> list[tuple[int, int]]:
    """Number the chain starts of ``level`` row by row and return their positions.

    Each start cell gets the 1-based number of its chain as its place.
    """
    starts = []
    for row, col, cell in level.cells():
        if cell.state == START:
            starts.append((row, col))
            cell.place = len(starts)
    return starts


class Game:
    """One level being played: the grid, the head of every chain and the selected chain."""

    def __init__(self, original: Level) -> None:
        self.original = original.copy()
        self.level = self.original.copy()
        self.heads: list[tuple[int, int]] = find_starts(self.level)
        self.chain = 0

    @property
    def chain_count(self) -> int:
        """Number of chains in the level."""
        return len(self.heads)

    @property
    def solved(self) -> bool:
        """Whether every cell of the puzzle is covered by a chain."""
        return not self.level.is_unfinished()

    def _cell_at(self, row: int, col: int) -> Cell | None:
        if 0 <= row < self.level.height and 0 <= col < self.level.width:
            return self.level.grid[row][col]
        return None

    def _has_chain(self) -> bool:
        return 0 <= self.chain < len(self.heads)

    def move(self, direction: Direction) -> bool:
        """Grow the selected chain one step; return whether it moved."""
        if not self._has_chain():
            return False
        row, col = self.heads[self.chain]
        current = self.level.grid[row][col]
        target_pos = direction.step(row, col)
        target = self._cell_at(*target_pos)
        if target is None or not can_enter(current, target):
            return False
        target.previous = direction
        target.place = self.chain + 1
        self.heads[self.chain] = target_pos
        return True

    def undo(self) -> bool:
        """Take back the last step of the selected chain; return whether it did."""
        if not self._has_chain():
            return False
        row, col = self.heads[self.chain]
        cell = self.level.grid[row][col]
        direction = cell.previous
        if direction is None:
            return False
        # A northward step is only taken back on a cell held by the first chain.
        owner = 1 if direction is Direction.NORTH else self.chain + 1
        if cell.place != owner:
            return False
        cell.place = 0
        self.heads[self.chain] = (row - direction.row_delta, col - direction.col_delta)
        return True

    def erase(self) -> None:
        """Free every cell of the selected chain and put its head back on its start."""
        number = self.chain + 1
        for row, col, cell in self.level.cells():
            if cell.place != number:
                continue
            if cell.state != START:
                cell.place = 0
                cell.previous = None
            elif self._has_chain():
                self.heads[self.chain] = (row, col)

    def reset(self) -> None:
        """Restore the level to its starting grid; the selected chain is kept."""
        self.level = self.original.copy()
        self.heads = find_starts(self.level)

    def next_chain(self) -> None:
        """Select the following chain, wrapping round after the last one."""
        if self.chain >= self.chain_count - 1:
            self.chain = 0
        else:
            self.chain += 1

    def handle(self, key: str) -> None:
        """Apply the command named by the first character of ``key``.

        Unknown keys are ignored. Keys are lower case.
        """
        if not key:
            return
        char = key[0]
        try:
            self.move(Direction.from_key(char))
            return
        except ValueError:
            pass
        try:
            command = Command(char)
        except ValueError:
            return
        if command is Command.RESET:
            self.reset()
        elif command is Command.UNDO:
            self.undo()
        elif command is Command.OTHER_CHAIN:
            self.next_chain()
        elif command is Command.ERASE:
            self.erase()