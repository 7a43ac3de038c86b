"""Interactive terminal game running through every built-in level."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from chainpuzzle.game import Game
from chainpuzzle.level import LEVEL_COUNT, Level, level
from chainpuzzle.render import render_grid

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def play(
    levels: Iterable[Level],
    read: Callable[[], str],
    write: Callable[[str], object],
) -> int:
    """Play ``levels`` in order and return how many were completed.

    ``read`` returns the next command word and raises EOFError when input
    runs out, which ends the game. The selected chain carries over from one
    level to the next.
    """
    chain = 0
    completed = 0
    for original in levels:
        game = Game(original)
        if chain < game.chain_count:
            game.chain = chain
        write(render_grid(game.level))
        while not game.solved:
            try:
                key = read()
            except EOFError:
                return completed
            game.handle(key)
            write(CLEAR_SCREEN)
            write(render_grid(game.level))
        chain = game.chain
        write(CLEAR_SCREEN)
        completed += 1
    return completed


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="chainpuzzle",
        description="Cover every square by growing chains uphill from their starts.",
    )
    parser.parse_args(argv)

    words = _words(sys.stdin)

    def read() -> str:
        try:
            return next(words)
        except StopIteration:
            raise EOFError from None

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    play((level(n) for n in range(1, LEVEL_COUNT + 1)), read, write)
    return 0


if __name__ == "__main__":
    sys.exit(main())