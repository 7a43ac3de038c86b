"""Text rendering of a level for a colour terminal."""

from __future__ import annotations

from chainpuzzle.level import EMPTY, START, Level

_DEFAULT_COLOUR = 15


def _attribute(value: int) -> str:
    """ANSI escape for a console colour attribute (background * 16 + foreground)."""
    fg, bg = value & 0xF, (value >> 4) & 0xF

    def code(index: int, base: int) -> int:
        red, green, blue = index & 4, index & 2, index & 1
        colour = (1 if red else 0) + (2 if green else 0) + (4 if blue else 0)
        return colour + base + (60 if index & 8 else 0)

    return f"\x1b[{code(fg, 30)};{code(bg, 40)}m"


def menu() -> str:
    """The list of commands shown under the grid."""
    return (
        "Select a direction (N, S, E, W).\n Cancel the previous move(B).\n"
        "Erase the chain (R).\n Restart the level (X).\n"
        "Select another chain (C)\n"
    )


def render_grid(level: Level) -> str:
    """Draw the grid, colouring each chain, followed by the command menu."""
    reset = _attribute(_DEFAULT_COLOUR)
    lines = []
    for row in level.grid:
        parts = []
        for cell in row:
            if cell.state == START:
                parts.append(f"{_attribute(cell.place)} x {reset}")
            elif cell.state == EMPTY:
                parts.append("   ")
            elif cell.state > 0:
                colour = cell.place or _DEFAULT_COLOUR
                parts.append(f"{_attribute(colour)} {cell.state} {reset}")
            else:
                parts.append(f"{reset} {cell.state} ")
        lines.append("".join(parts) + "\n")
    return "".join(lines) + menu()