import numpy as np
import pytest

from mancala.core.board import Player
from mancala.core.position import Position
from mancala.core.position_invariants import assert_position_invariant, assert_stone_invariant


def assert_position(position, bowls, capture, player):
    assert position.bowls.tolist() == bowls
    assert position.capture == capture
    assert position.player == player


# ---------------- Construction ----------------

def test_new_position_fills_every_bowl():
    position = Position.new(3, 2)

    assert_position(position, [2, 2, 2, 2, 2, 2], (0, 0), Player.RED)
    assert position.size == 3


def test_from_bowls_keeps_stores_and_player():
    position = Position.from_bowls([3, 0, 1, 2], capture=(4, 5), player=Player.BLUE)

    assert_position(position, [3, 0, 1, 2], (4, 5), Player.BLUE)
    assert position == Position([3, 0, 1, 2], (4, 5), Player.BLUE)


def test_from_bowls_rejects_odd_boards():
    with pytest.raises(ValueError):
        Position.from_bowls([1, 2, 3])


@pytest.mark.parametrize("bowls", [[], [1, 2, 3]])
def test_odd_or_empty_boards_are_rejected(bowls):
    with pytest.raises(ValueError):
        Position(bowls)


def test_negative_stones_are_rejected():
    with pytest.raises(ValueError):
        Position([1, -1])


def test_bowls_are_read_only():
    position = Position([1, 1])

    with pytest.raises(ValueError):
        position.bowls[0] = 5


# ---------------- Options ----------------

def test_options_are_non_empty_mover_bowls_ascending():
    position = Position([3, 0, 1, 0, 5, 5, 5, 5])

    assert position.options() == [0, 2]


def test_options_ignore_far_side():
    assert Position([0, 0, 4, 4]).options() == []


# ---------------- Sowing ----------------

def test_passing_own_store_and_landing_on_far_side():
    result = Position([2, 2, 2, 2]).play(1)

    assert_position(result, [3, 2, 2, 0], (0, 1), Player.BLUE)


def test_multiple_laps_around_the_board():
    result = Position([6, 6, 6, 6]).play(0)

    assert_position(result, [7, 7, 1, 8], (0, 1), Player.BLUE)


def test_landing_in_own_store_keeps_the_turn():
    result = Position([2, 2, 2, 2, 2, 2]).play(1)

    assert_position(result, [2, 0, 3, 2, 2, 2], (1, 0), Player.RED)


def test_landing_in_empty_own_bowl_captures_opposite_bowl():
    result = Position([2, 2, 0, 2, 2, 2, 2, 2]).play(0)

    assert_position(result, [2, 0, 2, 2, 0, 3, 1, 2], (0, 2), Player.BLUE)


def test_landing_in_occupied_own_bowl_does_not_capture():
    result = Position([1, 1, 5, 5]).play(0)

    # bowl 1 goes from 1 to 2 stones
    assert_position(result, [5, 5, 0, 2], (0, 0), Player.BLUE)


def test_capture_of_an_empty_opposite_bowl_captures_nothing():
    result = Position([1, 0, 0, 3]).play(0)

    assert_position(result, [0, 3, 0, 1], (0, 0), Player.BLUE)


def test_opponent_store_is_skipped():
    # store, far 2, far 3, then straight on to own bowl 0
    result = Position([0, 4, 0, 0], capture=(0, 3)).play(1)

    assert result.total() == 7
    assert_position(result, [1, 0, 1, 0], (3, 2), Player.BLUE)


def test_full_lap_ends_in_the_emptied_bowl():
    # 5 stones on a 2-bowl board make exactly one lap back to bowl 1
    result = Position([0, 5, 0, 0], capture=(0, 3)).play(1)

    assert result.total() == 8
    assert_position(result, [0, 1, 1, 1], (3, 2), Player.BLUE)


def test_play_does_not_modify_the_original_position():
    position = Position([2, 2, 2, 2])
    position.play(0)

    assert_position(position, [2, 2, 2, 2], (0, 0), Player.RED)


def test_playing_an_empty_bowl_fails():
    assert Position([0, 2, 2, 2]).play(0) is None


@pytest.mark.parametrize("bowl", [-1, 2, 3])
def test_playing_outside_the_mover_side_is_an_error(bowl):
    with pytest.raises(ValueError):
        Position([2, 2, 2, 2]).play(bowl)


@pytest.mark.parametrize("bowls,stones", [(1, 3), (2, 4), (3, 7), (6, 4), (4, 20)])
def test_stones_are_conserved(rng, bowls, stones):
    position = Position.new(bowls, stones)
    total = position.total()

    for _ in range(300):
        if position.finished():
            break
        position = position.play(rng.choice(position.options()))
        assert position.total() == total


def test_debug_mode_checks_every_sow(rng):
    position = Position.new(3, 3, debug=True)

    for _ in range(300):
        if position.finished():
            break
        position = position.play(rng.choice(position.options()))

    assert position.debug
    assert position.total() == 18


# ---------------- Finish / Score ----------------

def test_fresh_position_is_not_finished(standard_position):
    assert not standard_position.finished()
    assert standard_position.score() is None


def test_position_with_empty_mover_side_is_finished():
    position = Position([0, 0, 2, 2])

    assert position.finished()
    assert position.score() == -4


def test_finished_rule_only_looks_at_mover_side():
    assert not Position([2, 2, 0, 0]).finished()


def test_score_includes_both_stores():
    assert Position([0, 0, 2, 2], capture=(5, 0)).score() == 1


def test_delta_is_store_difference():
    assert Position([1, 1, 1, 1], capture=(7, 3)).delta() == 4


# ---------------- Comparison ----------------

def test_equal_positions_hash_alike():
    a = Position([1, 2, 3, 4], capture=(1, 0))
    b = Position(np.array([1, 2, 3, 4]), capture=(1, 0))

    assert a == b
    assert hash(a) == hash(b)
    assert a != Position([1, 2, 3, 4], capture=(1, 0), player=Player.BLUE)


# ---------------- Invariants ----------------

def test_stone_invariant_reports_lost_stones():
    position = Position([1, 1, 1, 1])

    with pytest.raises(AssertionError, match="STONE LOST"):
        assert_stone_invariant(position, position.total() + 1, "test")


def test_position_invariant_accepts_valid_position():
    position = Position([1, 1, 1, 1])

    assert_position_invariant(position, "test", position.total())
