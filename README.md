# chainpuzzle

chainpuzzle is a small puzzle game that runs in a terminal. It has thirty built-in levels.
Each level is a grid of numbered cells, and some cells are holes. Every chain starts on a
cell marked `x`, and you grow it one cell at a time. A chain can move onto a cell only
when that cell is free, is not a hole, and has a number no lower than the cell the chain's
head is on. A level is solved once every cell except the holes is covered by a chain.

## Installation

```
pip install .
```

## Playing

```
chainpuzzle
```

The game shows the current grid and then the list of commands. Commands are read from
standard input as whitespace-separated words. Only the first character of each word
counts, and it must be lower case:

| Key | Action |
|-----|--------|
| `n`, `s`, `e`, `w` | Grow the selected chain north, south, east or west |
| `b` | Take back the last step of the selected chain |
| `r` | Erase the selected chain back to its start |
| `x` | Restart the level (the selected chain does not change) |
| `c` | Select the next chain, going back to the first after the last |

Keys that are not in the table are ignored, and so are moves that the rules do not allow.
Once a level is solved, the game moves on to the next level. The game ends after the last
level, or earlier if input runs out. Chains are drawn in colour, and the screen is cleared
between frames. Both use ANSI escape sequences, so the terminal has to support them.

The command takes only `-h`/`--help`. There is no way to choose a starting level, and
progress is not saved between runs.

## Using it as a library

```python
from chainpuzzle.cardinal import Direction
from chainpuzzle.game import Game
from chainpuzzle.level import level
from chainpuzzle.render import render_grid

game = Game(level(1))
game.move(Direction.EAST)        # True if the chain grew
print(render_grid(game.level))
print(game.solved)
```

- `chainpuzzle.level`
  - `level(number)` returns a fresh copy of built-in level `number`, counting from 1 up to `LEVEL_COUNT`.
  - `Level.from_rows(rows, width, height)` builds a custom grid. Each entry is a state (`-1` for a start, `0` for a hole, or a positive height) or a `(state, place)` pair. Width and height can be at most 10.
- `chainpuzzle.game`
  - `Game` holds a level that is being played.
  - `Game.move`, `undo`, `erase`, `reset` and `next_chain` perform the moves and commands.
  - `Game.handle(key)` accepts the same keys as the terminal game.
  - `can_enter(current, target)` tests the climbing rule, and `find_starts(level)` numbers the chains.
- `chainpuzzle.cardinal.Direction` is the set of four directions. `Direction.from_key(key)` looks a direction up by its key, and `step(row, col)` gives the neighbouring position.
- `chainpuzzle.render`: `render_grid(level)` returns the coloured grid followed by the command list, and `menu()` returns the command list alone.
- `chainpuzzle.cli`: `play(levels, read, write)` runs the game loop with your own input and output callables and returns how many levels were completed. `read` raises `EOFError` to stop the loop.

## Running the tests

```
pip install .[test]
pytest
```