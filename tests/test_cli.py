import io

from chainpuzzle.cli import CLEAR_SCREEN, main, play
from chainpuzzle.level import Level, level
from chainpuzzle.render import menu


def reader(words):
    it = iter(words)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_play_completes_level():
    out = []
    done = play([level(1)], reader(["e", "e", "e"]), out.append)
    assert done == 1
    assert menu() in out[0]
    assert out[-1] == CLEAR_SCREEN


def test_play_stops_at_end_of_input():
    out = []
    done = play([level(1), level(2)], reader(["e"]), out.append)
    assert done == 0
    assert out.count(CLEAR_SCREEN) == 1


def test_play_skips_level_without_cells():
    out = []
    done = play([Level.from_rows((), 0, 0)], reader([]), out.append)
    assert done == 1
    assert out == [menu(), CLEAR_SCREEN]


def test_selected_chain_carries_over():
    first = Level.from_rows(((-1, 1), (-1, 1)), 2, 2)
    second = Level.from_rows(((-1, 0, 0), (-1, 1, 1)), 3, 2)
    out = []
    done = play([first, second], reader(["e", "c", "e", "e", "e"]), out.append)
    assert done == 2


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("e e\ne\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Select a direction (N, S, E, W)." in captured
    assert captured.count(CLEAR_SCREEN) == 4