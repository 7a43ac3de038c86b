import pytest

from chainpuzzle.cardinal import Direction
from chainpuzzle.game import Command, Game, can_enter, find_starts
from chainpuzzle.level import Cell, Level, level


def line_level():
    return Level.from_rows(((-1, 1, 1, 1),), 4, 1)


def two_chain_level():
    return Level.from_rows(((1, 1), (-1, -1)), 2, 2)


def test_can_enter_rules():
    assert can_enter(Cell(-1), Cell(1)) is True
    assert can_enter(Cell(2), Cell(2)) is True
    assert can_enter(Cell(3), Cell(2)) is False
    assert can_enter(Cell(1), Cell(0)) is False
    assert can_enter(Cell(1), Cell(1, place=2)) is False


def test_find_starts_numbers_row_by_row():
    lvl = Level.from_rows(((1, 0, -1), (-1, 0, 1)), 3, 2)
    starts = find_starts(lvl)
    assert starts == [(0, 2), (1, 0)]
    assert lvl.grid[0][2].place == 1
    assert lvl.grid[1][0].place == 2


def test_find_starts_is_idempotent():
    lvl = Level.from_rows(((1, 0, -1), (-1, 0, 1)), 3, 2)
    first = find_starts(lvl)
    assert find_starts(lvl) == first


def test_game_does_not_touch_original():
    original = line_level()
    game = Game(original)
    game.move(Direction.EAST)
    assert original.grid[0][0].place == 0
    assert original.grid[0][1].place == 0


def test_moves_solve_line():
    game = Game(line_level())
    assert all(game.move(Direction.EAST) for _ in range(3))
    assert game.solved
    assert game.heads == [(0, 3)]
    assert [cell.place for cell in game.level.grid[0]] == [1, 1, 1, 1]
    assert game.level.grid[0][3].previous is Direction.EAST


def test_move_blocked_cases():
    game = Game(Level.from_rows(((-1, 2, 1, 0),), 4, 1))
    assert game.move(Direction.WEST) is False
    assert game.move(Direction.NORTH) is False
    assert game.move(Direction.EAST) is True
    assert game.move(Direction.EAST) is False
    assert game.heads == [(0, 1)]
    assert not game.solved


def test_undo_steps_back():
    game = Game(line_level())
    game.move(Direction.EAST)
    game.move(Direction.EAST)
    assert game.undo() is True
    assert game.heads == [(0, 1)]
    assert game.level.grid[0][2].place == 0
    assert game.undo() is True
    assert game.heads == [(0, 0)]
    assert game.undo() is False
    assert game.heads == [(0, 0)]


def test_undo_north_only_for_first_chain():
    game = Game(two_chain_level())
    assert game.move(Direction.NORTH)
    assert game.undo() is True
    assert game.level.grid[0][0].place == 0

    game.next_chain()
    assert game.move(Direction.NORTH)
    assert game.undo() is False
    assert game.level.grid[0][1].place == 2
    assert game.heads[1] == (0, 1)


def test_erase_frees_chain():
    game = Game(line_level())
    game.move(Direction.EAST)
    game.move(Direction.EAST)
    game.erase()
    assert game.heads == [(0, 0)]
    assert [cell.place for cell in game.level.grid[0]] == [1, 0, 0, 0]
    assert all(cell.previous is None for cell in game.level.grid[0])


def test_erase_leaves_other_chain():
    game = Game(two_chain_level())
    game.move(Direction.NORTH)
    game.next_chain()
    game.move(Direction.NORTH)
    game.erase()
    assert game.level.grid[0][0].place == 1
    assert game.level.grid[0][1].place == 0
    assert game.heads == [(0, 0), (1, 1)]


def test_reset_restores_grid_and_keeps_chain():
    game = Game(two_chain_level())
    game.next_chain()
    game.move(Direction.NORTH)
    game.reset()
    assert game.chain == 1
    assert game.heads == [(1, 0), (1, 1)]
    assert game.level == Game(two_chain_level()).level


def test_next_chain_wraps():
    game = Game(two_chain_level())
    game.next_chain()
    assert game.chain == 1
    game.next_chain()
    assert game.chain == 0
    single = Game(line_level())
    single.next_chain()
    assert single.chain == 0


@pytest.mark.parametrize("key", ["e", "east", "e1"])
def test_handle_uses_first_character(key):
    game = Game(line_level())
    game.handle(key)
    assert game.heads == [(0, 1)]


@pytest.mark.parametrize("key", ["E", "", "q", "?"])
def test_handle_ignores_unknown(key):
    game = Game(line_level())
    game.handle(key)
    assert game.heads == [(0, 0)]
    assert game.chain == 0


def test_handle_commands():
    game = Game(two_chain_level())
    game.handle(Command.OTHER_CHAIN.value)
    assert game.chain == 1
    game.handle("n")
    assert game.heads[1] == (0, 1)
    game.handle(Command.ERASE.value)
    assert game.heads[1] == (1, 1)
    game.handle("n")
    game.handle(Command.UNDO.value)
    assert game.level.grid[0][1].place == 2
    game.handle(Command.RESET.value)
    assert game.level.grid[0][1].place == 0


def test_builtin_first_level_solved_by_keys():
    game = Game(level(1))
    for key in ("e", "e", "e"):
        game.handle(key)
    assert game.solved


def test_empty_level_has_no_chain():
    game = Game(level(11))
    assert game.chain_count == 0
    assert game.move(Direction.EAST) is False
    assert game.undo() is False
    assert game.solved