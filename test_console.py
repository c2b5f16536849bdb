"""
Tests for the terminal front-end.
"""
import pytest

from reversi.console import Command, parse_command, format_move, render, run_session
from reversi.game import Board, Player, ReversiGame, Outcome


@pytest.mark.parametrize("line, expected", [
    ("2 3", Command('move', (2, 3))),
    ("  4,5 ", Command('move', (4, 5))),
    ("d3", Command('move', (2, 3))),
    ("F5", Command('move', (4, 5))),
    ("reset", Command('reset')),
    ("MOVES", Command('moves')),
    ("help", Command('help')),
    ("q", Command('quit')),
    ("quit", Command('quit')),
    ("new 6", Command('new', size=6)),
])
def test_parse_command(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "hello", "2", "1 2 3", "d0", "3d", "\u00b2 3", "d\u00b2", "new", "new six"])
def test_parse_command_rejects(line):
    assert parse_command(line) is None


def test_format_move():
    assert format_move((2, 3)) == "d3"
    assert format_move((0, 0)) == "a1"


def test_render_marks_valid_moves():
    text = render(ReversiGame(6))
    lines = text.splitlines()

    assert lines[0] == "   a b c d e f"
    assert lines[2] == " 2 . . * . . ."
    assert lines[3] == " 3 . * W B . ."
    assert "Black: 2  White: 2" in text
    assert lines[-1] == "Black to move"


def test_session_plays_moves():
    output = []
    game = run_session(ReversiGame(8), ["d3", "0 0", "moves", "nonsense", "quit", "e3"], output.append)

    assert tuple(game.get_score()) == (4, 1)
    assert game.get_current_player() is Player.WHITE
    # The illegal move changes nothing: the same board is shown again
    assert output[2] == output[1]
    assert "c3 e3 c5" in output
    assert "Unrecognised input, type 'help' for commands" in output


def test_session_reset():
    game = ReversiGame(6)
    run_session(game, ["c2", "reset"], lambda _: None)

    assert game.board == Board.initial(6)
    assert game.get_current_player() is Player.BLACK


def test_session_reports_result():
    output = []
    game = ReversiGame(4)
    game.set_position(Board.from_string("W B . .\n. . . .\n. . . .\n. . . ."), Player.WHITE)
    run_session(game, ["c1", "moves"], output.append)

    assert game.get_winner() is Outcome.WHITE
    assert "Game over! White wins!" in output[1]
    assert output[-1] == "No legal moves"


def test_session_ignores_non_ascii_digits():
    output = []
    game = run_session(ReversiGame(8), ["² 3", "d²", "d3"], output.append)

    assert output.count("Unrecognised input, type 'help' for commands") == 2
    assert tuple(game.get_score()) == (4, 1)


def test_session_switches_board_size():
    output = []
    game = run_session(ReversiGame(8), ["d3", "new 6", "c2", "new 10", "new 8"], output.append)

    assert game.size == 8
    assert game.board == Board.initial(8)
    assert game.get_current_player() is Player.BLACK
    assert output[2].splitlines()[0] == "   a b c d e f"
    assert "Black: 4  White: 1" in output[3]
    assert output[4] == "Board size must be one of 6, 8"


def test_session_new_size_respects_allowed_sizes():
    game = run_session(ReversiGame(8), ["new 6", "new 10"], lambda _: None, allowed_sizes=[8, 10])

    assert game.size == 10
    assert game.board == Board.initial(10)
