import pytest

from mancala.core.board import Player
from mancala.core.game import Game, GameBuilder, GameConfig, NoStonesInBowl
from mancala.core.moves import Play
from mancala.core.position import Position


def test_builder_defaults_to_standard_board():
    game = GameBuilder().build()

    assert game.current == Position.new(6, 4)
    assert game.history == []


def test_builder_accepts_bowls_and_stones():
    game = GameBuilder().bowls(3).stones(2).build()

    assert game.current == Position([2, 2, 2, 2, 2, 2])


def test_builder_accepts_config():
    game = GameBuilder(GameConfig(bowls=2, stones=5)).build()

    assert game.current.bowls.tolist() == [5, 5, 5, 5]


def test_fresh_game_is_not_finished():
    game = GameBuilder().bowls(6).stones(4).build()

    assert not game.finished()
    assert game.turn() == Player.RED


def test_game_knows_options_to_play():
    game = GameBuilder().bowls(3).stones(2).build()

    assert game.options() == [0, 1, 2]


def test_game_records_history_of_what_is_played():
    game = GameBuilder().bowls(3).stones(2).build()

    game.play(0)

    expected = Game(Position([2, 2, 2, 0, 3, 3], player=Player.BLUE), [Play(Player.RED, 0)])
    assert game == expected
    assert game.turn() == Player.BLUE


def test_playing_an_empty_bowl_raises_and_leaves_game_untouched():
    game = Game(Position([0, 1, 1, 1]))

    with pytest.raises(NoStonesInBowl) as excinfo:
        game.play(0)

    assert excinfo.value.player == Player.RED
    assert excinfo.value.bowl == 0
    assert game.history == []
    assert game.current == Position([0, 1, 1, 1])


def test_score_is_absent_until_finished():
    game = GameBuilder().bowls(2).stones(2).build()

    assert game.score() is None
    assert game.score_for(Player.RED) is None


def test_score_for_player_undoes_board_rotation():
    game = Game(Position([0, 0, 2, 2], capture=(5, 0), player=Player.BLUE))

    assert game.score() == 1
    assert game.score_for(Player.BLUE) == 1
    assert game.score_for(Player.RED) == -1
