import pytest

from mancala.cli.boardDisplay import BoardDisplay
from mancala.cli.game import CLISetup, ExitGame, MancalaCLI, parse_args, read_bowl
from mancala.core.board import Player
from mancala.core.position import Position
from mancala.players.alphabeta import AlphaBeta
from mancala.players.depth import Depth
from mancala.players.human import User
from mancala.players.ids import IterativeDeepening
from mancala.players.naive import First


# ---------------- Board display ----------------

def test_board_renders_far_side_reversed_on_top():
    position = Position([1, 2, 3, 4, 5, 6], capture=(7, 8))

    rows = BoardDisplay(position, clear_screen=False, use_color=False).rows()

    assert rows == [
        "8 |  6  5  4 |",
        "  |  1  2  3 | 7",
    ]


def test_board_aligns_wide_stores():
    position = Position([1, 1], capture=(3, 12))

    rows = BoardDisplay(position, clear_screen=False, use_color=False).rows()

    assert rows == [
        "12 |  1 |",
        "   |  1 | 3",
    ]


def test_draw_all_prints_header_and_rows(capsys):
    BoardDisplay(Position([1, 1]), clear_screen=False, use_color=False).draw_all()

    assert capsys.readouterr().out.splitlines() == ["--- Board ---", "0 |  1 |", "  |  1 | 0"]


# ---------------- User strategy ----------------

def test_user_is_asked_until_a_playable_bowl_is_entered():
    answers = iter(["x", "5", "0", "1"])
    messages = []
    user = User(input_func=lambda prompt: next(answers), output_func=messages.append)

    bowl = user.play(Position([0, 2, 2, 2]))

    assert bowl == 1
    assert messages == ["enter a bowl.", "not an option", "not an option"]


def test_user_is_shown_the_position():
    shown = []
    user = User(input_func=lambda prompt: "0", show_position=shown.append)
    position = Position([1, 1])

    assert user.play(position) == 0
    assert shown == [position]


# ---------------- Setup ----------------

@pytest.mark.parametrize("name,cls", [("alphabeta", AlphaBeta), ("ids", IterativeDeepening), ("first", First), ("user", User)])
def test_strategy_from_name(name, cls):
    assert isinstance(CLISetup.strategy_from_name(name, Depth.limited(3)), cls)


def test_alphabeta_from_name_uses_depth():
    strategy = CLISetup.strategy_from_name("alphabeta", Depth.limited(3))

    assert strategy.config.depth == Depth.limited(3)


def test_unknown_strategy_is_rejected():
    with pytest.raises(ValueError):
        CLISetup.strategy_from_name("oracle", Depth.limited(3))


def test_default_arguments():
    args = parse_args([])

    assert (args.bowls, args.stones, args.depth) == (6, 4, 5)
    assert (args.red, args.blue) == ("user", "alphabeta")


def test_cli_plays_a_computer_bout(capsys):
    args = parse_args(["--bowls", "2", "--stones", "2", "--red", "first", "--blue", "alphabeta", "--delay", "0"])

    assert MancalaCLI(args).run() == 0
    assert "Game Over!" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--depth=0", "--depth=-1", "--bowls=0", "--stones=two"])
def test_out_of_range_arguments_exit_with_usage(flag, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args([flag])

    assert excinfo.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_shallowest_depth_still_plays(capsys):
    args = parse_args(["-b", "2", "-s", "2", "-d", "1", "--red", "alphabeta", "--blue", "ids", "--delay", "0"])

    assert MancalaCLI(args).run() == 0
    assert "Game Over!" in capsys.readouterr().out


# ---------------- Terminal input ----------------

def test_read_bowl_strips_the_answer(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: " 2 \n")

    assert read_bowl("enter a play [2]: ") == "2"


@pytest.mark.parametrize("answer", ["q", "QUIT"])
def test_read_bowl_quits_on_request(monkeypatch, answer):
    monkeypatch.setattr("builtins.input", lambda prompt: answer)

    with pytest.raises(ExitGame):
        read_bowl("enter a play [0]: ")


def test_read_bowl_quits_at_end_of_input(monkeypatch):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)

    with pytest.raises(ExitGame):
        read_bowl("enter a play [0]: ")
